"""
Location service for the address record owned by a property.
Locations are only created and updated on behalf of their owning property.
"""

from listings.database import utcnow
from listings.models.location import Location
from listings.repositories.location import LocationRepository
from listings.schemas.location import LocationCreate, LocationUpdate
from listings.utils.exceptions import (
    LocationCreationError,
    LocationNotFoundError,
    LocationSaveError
)
import logging

logger = logging.getLogger(__name__)


class LocationService:
    """Creates and updates owned locations; commits are left to the owning workflow."""

    def __init__(self, location_repo: LocationRepository):
        self.location_repo = location_repo

    async def create_location(self, location_data: LocationCreate) -> Location:
        """
        Map and stage a new location.

        Args:
            location_data: Location creation data

        Returns:
            Staged location with its identity assigned

        Raises:
            LocationCreationError: If the location cannot be built or staged
        """
        try:
            location = Location(**location_data.model_dump())
            location.validate_all()
            location = await self.location_repo.add(location)

            logger.debug(f"Location staged: {location.city} (ID: {location.id})")
            return location

        except Exception as e:
            logger.error(f"Failed to create location: {e}", exc_info=True)
            raise LocationCreationError(f"Failed to create location: {e}", cause=e) from e

    async def update_location(self, location_id: int, location_data: LocationUpdate) -> Location:
        """
        Apply the non-null fields of a partial update to an existing location.

        Args:
            location_id: Identity of the owned location
            location_data: Partial location data

        Returns:
            Updated location

        Raises:
            LocationNotFoundError: If the location doesn't exist
            LocationSaveError: If the update cannot be staged
        """
        location = await self.location_repo.get_by_id(location_id)
        if not location:
            logger.warning(f"Location {location_id} not found for update")
            raise LocationNotFoundError(location_id)

        try:
            changes = {
                field: value
                for field, value in location_data.model_dump(exclude_unset=True).items()
                if value is not None
            }
            for field, value in changes.items():
                setattr(location, field, value)

            if changes:
                location.validate_all()
                location.updated_at = utcnow()
                await self.location_repo.add(location)

            logger.debug(f"Location {location_id} updated fields: {sorted(changes)}")
            return location

        except Exception as e:
            logger.error(f"Failed to update location {location_id}: {e}", exc_info=True)
            raise LocationSaveError(f"Failed to update location: {e}", cause=e) from e
