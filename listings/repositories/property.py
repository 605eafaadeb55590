"""
Property repository for listing queries driven by composable predicates.
All listing queries are ordered by most recent update first.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import desc
from sqlalchemy.sql.elements import ColumnElement
from listings.repositories.base import BaseRepository
from listings.models.property import Property
from listings.utils.pagination import PageRequest
from typing import Optional, List, Tuple
import uuid
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for properties and their owned locations.
    The location relationship is loaded eagerly with every property.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def get_with_location(self, property_id: uuid.UUID) -> Optional[Property]:
        """
        Get property with its location.

        Args:
            property_id: UUID of the property

        Returns:
            Property or None if not found
        """
        return await self.get_by_id(property_id)

    async def find_page(
        self,
        predicate: Optional[ColumnElement[bool]],
        page_request: PageRequest
    ) -> Tuple[List[Property], int]:
        """
        Find one page of properties matching a predicate.

        Ties on ``updated_at`` fall back to the store's native order.

        Args:
            predicate: Combined filter clause, or None for no restriction
            page_request: Normalized page request

        Returns:
            Tuple of (properties list, total count)
        """
        conditions = [predicate] if predicate is not None else []
        properties, total = await self.paginate(
            conditions=conditions,
            skip=page_request.offset,
            limit=page_request.size,
            order_by=[desc(Property.updated_at)]
        )
        logger.debug(
            f"Property page {page_request.page} (size {page_request.size}) "
            f"returned {len(properties)} of {total} total results"
        )
        return properties, total
