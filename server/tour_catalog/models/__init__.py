"""Models module exporting all database models."""

from .tour import Accommodation, Destination, Tour

__all__ = [
    "Tour",
    "Destination",
    "Accommodation",
]
