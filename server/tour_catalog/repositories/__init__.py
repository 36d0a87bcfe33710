"""Storage gateways for the tour aggregate."""

from .base import TourGateway
from .tour_repository import SqlAlchemyTourRepository

__all__ = [
    "TourGateway",
    "SqlAlchemyTourRepository",
]
