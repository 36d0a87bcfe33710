"""Tour-related Pydantic schemas.

Requests carry the full nested aggregate. Responses come in two shapes:
summaries for listing and search (no accommodation nesting) and a detail
view for single-tour reads. Neither shape exposes internal identifiers.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from .common import CamelModel


class AccommodationRequest(CamelModel):
    """Lodging attached to a destination in a create/update request."""

    name: str = Field(..., min_length=1, max_length=255, description="Accommodation name")
    type: Optional[str] = Field(None, max_length=64, description="Hotel, hostel, lodge, ...")
    location: Optional[str] = Field(None, max_length=255, description="Address or area")
    details: Optional[str] = Field(None, description="Free-text details")
    check_in: Optional[str] = Field(None, max_length=32, description="Check-in time")
    check_out: Optional[str] = Field(None, max_length=32, description="Check-out time")


class DestinationRequest(CamelModel):
    """Destination within a create/update request."""

    dest_name: str = Field(..., min_length=1, max_length=255, description="Destination name")
    state: Optional[str] = Field(None, max_length=255, description="State or region")
    description: Optional[str] = Field(None, description="Destination description")
    accommodation: Optional[AccommodationRequest] = Field(None, description="Optional lodging")


class TourRequest(CamelModel):
    """Request schema for creating or updating a tour."""

    title: str = Field(..., min_length=1, max_length=255, description="Tour title")
    description: Optional[str] = Field(None, description="Tour description")
    duration: Optional[str] = Field(None, max_length=64, description="Duration, e.g. '7 days'")
    start_date: date = Field(..., description="Start date (ISO 8601)")
    price: float = Field(..., ge=0, description="Package price")
    image_link: Optional[str] = Field(None, max_length=2048, description="Image URL")
    destinations: list[DestinationRequest] = Field(..., min_length=1, description="Ordered destinations")


class AccommodationResponse(CamelModel):
    """Accommodation detail."""

    name: str
    type: Optional[str] = None
    location: Optional[str] = None
    details: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None


class DestinationSummary(CamelModel):
    """Destination as shown in listings."""

    dest_name: str
    state: Optional[str] = None
    description: Optional[str] = None


class DestinationDetail(DestinationSummary):
    """Destination including its accommodation, when there is one."""

    accommodation: Optional[AccommodationResponse] = None


class TourSummary(CamelModel):
    """Tour as shown in listings and title search."""

    title: str
    description: Optional[str] = None
    image_link: Optional[str] = None
    duration: Optional[str] = None
    start_date: date
    price: float
    destinations: list[DestinationSummary] = Field(default_factory=list)


class TourDetail(CamelModel):
    """Tour as shown when fetched by identifier."""

    title: str
    description: Optional[str] = None
    image_link: Optional[str] = None
    duration: Optional[str] = None
    start_date: date
    price: float
    destinations: list[DestinationDetail] = Field(default_factory=list)
