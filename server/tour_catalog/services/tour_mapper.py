"""Explicit conversions between tour entities and transport schemas.

Listing and search responses use the summary converters, which never carry
accommodation data. Only ``to_tour_detail`` nests accommodations.
"""

from typing import Iterable, List, Optional
from uuid import uuid4

from ..models.tour import Accommodation, Destination, Tour
from ..schemas.tour import (
    AccommodationRequest,
    AccommodationResponse,
    DestinationDetail,
    DestinationRequest,
    DestinationSummary,
    TourDetail,
    TourRequest,
    TourSummary,
)


# Request -> entity

def accommodation_from_request(request: Optional[AccommodationRequest]) -> Optional[Accommodation]:
    if request is None:
        return None
    return Accommodation(
        name=request.name,
        type=request.type,
        location=request.location,
        details=request.details,
        check_in=request.check_in,
        check_out=request.check_out,
    )


def destination_from_request(request: DestinationRequest, position: int = 0) -> Destination:
    return Destination(
        dest_name=request.dest_name,
        state=request.state,
        description=request.description,
        position=position,
        accommodation=accommodation_from_request(request.accommodation),
    )


def destinations_from_requests(requests: Iterable[DestinationRequest]) -> List[Destination]:
    """Build fresh destination entities, numbering them in request order."""
    return [
        destination_from_request(request, position)
        for position, request in enumerate(requests)
    ]


def tour_from_request(request: TourRequest) -> Tour:
    """New tour entity; the id is assigned here so it is known before the insert."""
    return Tour(
        id=uuid4(),
        title=request.title,
        description=request.description,
        duration=request.duration,
        start_date=request.start_date,
        price=request.price,
        image=request.image_link,
        destinations=destinations_from_requests(request.destinations),
    )


def apply_tour_request(tour: Tour, request: TourRequest) -> Tour:
    """
    Overwrite an existing tour with the request contents.

    The destination list is replaced wholesale; the image is left alone.
    """
    tour.title = request.title
    tour.description = request.description
    tour.duration = request.duration
    tour.start_date = request.start_date
    tour.price = request.price
    tour.destinations = destinations_from_requests(request.destinations)
    return tour


# Entity -> response

def to_accommodation_response(accommodation: Accommodation) -> AccommodationResponse:
    return AccommodationResponse(
        name=accommodation.name,
        type=accommodation.type,
        location=accommodation.location,
        details=accommodation.details,
        check_in=accommodation.check_in,
        check_out=accommodation.check_out,
    )


def to_destination_summary(destination: Destination) -> DestinationSummary:
    return DestinationSummary(
        dest_name=destination.dest_name,
        state=destination.state,
        description=destination.description,
    )


def to_destination_detail(destination: Destination) -> DestinationDetail:
    """Accommodation is left unset, not null, when the destination has none."""
    fields = {
        "dest_name": destination.dest_name,
        "state": destination.state,
        "description": destination.description,
    }
    if destination.accommodation is not None:
        fields["accommodation"] = to_accommodation_response(destination.accommodation)
    return DestinationDetail(**fields)


def to_tour_summary(tour: Tour) -> TourSummary:
    """Listing view; missing destinations are skipped."""
    return TourSummary(
        title=tour.title,
        description=tour.description,
        image_link=tour.image,
        duration=tour.duration,
        start_date=tour.start_date,
        price=tour.price,
        destinations=[
            to_destination_summary(destination)
            for destination in (tour.destinations or [])
            if destination is not None
        ],
    )


def to_tour_detail(tour: Tour) -> TourDetail:
    return TourDetail(
        title=tour.title,
        description=tour.description,
        image_link=tour.image,
        duration=tour.duration,
        start_date=tour.start_date,
        price=tour.price,
        destinations=[to_destination_detail(destination) for destination in tour.destinations],
    )
