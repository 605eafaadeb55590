"""
Repository layer for data access operations.
Provides the persistence store used by the workflow services.
"""

from listings.repositories.base import BaseRepository
from listings.repositories.location import LocationRepository
from listings.repositories.property import PropertyRepository

__all__ = [
    "BaseRepository",
    "LocationRepository",
    "PropertyRepository",
]
