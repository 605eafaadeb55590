"""
FastAPI dependency injection utilities for database sessions and services.
Wires the workflow service to its collaborators once per request.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from listings.config import settings
from listings.database import get_db
from listings.repositories.location import LocationRepository
from listings.repositories.property import PropertyRepository
from listings.services.location import LocationService
from listings.services.property import PropertyWorkflowService


async def get_location_service(db: AsyncSession = Depends(get_db)) -> LocationService:
    """
    Get location service instance.

    Args:
        db: Database session

    Returns:
        LocationService instance
    """
    return LocationService(LocationRepository(db))


async def get_property_service(
    db: AsyncSession = Depends(get_db),
    location_service: LocationService = Depends(get_location_service)
) -> PropertyWorkflowService:
    """
    Get property workflow service instance.

    Both services share the request's session so creation and update stay
    in a single transaction.

    Args:
        db: Database session
        location_service: Location service bound to the same session

    Returns:
        PropertyWorkflowService instance
    """
    return PropertyWorkflowService(
        db,
        PropertyRepository(db),
        location_service,
        strict_transitions=settings.strict_approval_transitions
    )
