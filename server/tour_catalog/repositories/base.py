"""Storage gateway interface for tours."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from ..models.tour import Tour


class TourGateway(ABC):
    """
    Persistence contract the tour service depends on.

    Implementations load a tour together with its destinations and their
    accommodations, and write the whole aggregate as one unit.
    """

    @abstractmethod
    async def exists_by_title_and_start_date(self, title: str, start_date: date) -> bool:
        """Whether a tour with this exact title and start date is stored."""

    @abstractmethod
    async def find_by_id(self, tour_id: UUID) -> Optional[Tour]:
        """Get tour by ID, or None."""

    @abstractmethod
    async def find_by_title(self, title: str) -> List[Tour]:
        """Get every tour whose title matches exactly."""

    @abstractmethod
    async def find_all_with_destinations(self) -> List[Tour]:
        """Get every tour with its destinations loaded."""

    @abstractmethod
    async def save(self, tour: Tour) -> Tour:
        """Insert or update the tour aggregate."""

    @abstractmethod
    async def delete(self, tour: Tour) -> None:
        """Delete the tour and everything it owns."""
