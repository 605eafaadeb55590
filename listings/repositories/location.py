"""
Location repository.
Locations are only reached through their owning property, so lookups are by id alone.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from listings.repositories.base import BaseRepository
from listings.models.location import Location


class LocationRepository(BaseRepository[Location]):
    """Repository for locations owned by properties."""

    def __init__(self, db: AsyncSession):
        super().__init__(Location, db)
