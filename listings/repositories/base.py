"""
Base repository class with common persistence operations using async SQLAlchemy.
Writes are staged and flushed on the session; the calling service commits once per unit of work.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, and_
from sqlalchemy.sql.elements import ColumnElement
from listings.database import Base
from typing import TypeVar, Generic, Optional, List, Any, Type, Tuple, Sequence
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common persistence operations.
    Uses async SQLAlchemy for all database operations.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def add(self, db_obj: ModelType) -> ModelType:
        """
        Stage a new or modified record and flush it so generated values are assigned.

        Args:
            db_obj: Model instance

        Returns:
            The same instance, flushed
        """
        try:
            self.db.add(db_obj)
            await self.db.flush()
            logger.debug(f"Staged {self.model.__name__} with id: {getattr(db_obj, 'id', None)}")
            return db_obj
        except Exception as e:
            logger.error(f"Failed to stage {self.model.__name__}: {e}")
            raise

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """
        Get a record by its ID.

        Args:
            id: Identifier of the record to retrieve

        Returns:
            Model instance if found, None otherwise
        """
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == id))
            obj = result.scalar_one_or_none()

            if obj:
                logger.debug(f"Retrieved {self.model.__name__} with id: {id}")
            else:
                logger.debug(f"{self.model.__name__} with id {id} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by id {id}: {e}")
            raise

    async def delete(self, db_obj: ModelType) -> None:
        """
        Stage deletion of a record; ORM cascades apply.

        Args:
            db_obj: Model instance to delete
        """
        try:
            await self.db.delete(db_obj)
            await self.db.flush()
            logger.debug(f"Staged deletion of {self.model.__name__} with id: {getattr(db_obj, 'id', None)}")
        except Exception as e:
            logger.error(f"Failed to delete {self.model.__name__}: {e}")
            raise

    async def count(self, conditions: Sequence[ColumnElement[bool]] = ()) -> int:
        """
        Count records matching all conditions.

        Args:
            conditions: SQLAlchemy boolean clauses

        Returns:
            Number of matching records
        """
        try:
            query = select(func.count()).select_from(self.model)
            if conditions:
                query = query.where(and_(*conditions))

            result = await self.db.execute(query)
            count = result.scalar_one()

            logger.debug(f"Counted {count} {self.model.__name__} records")
            return count
        except Exception as e:
            logger.error(f"Failed to count {self.model.__name__} records: {e}")
            raise

    async def paginate(
        self,
        conditions: Sequence[ColumnElement[bool]] = (),
        skip: int = 0,
        limit: int = 10,
        order_by: Sequence[Any] = ()
    ) -> Tuple[List[ModelType], int]:
        """
        Get one page of records matching all conditions.

        Args:
            conditions: SQLAlchemy boolean clauses
            skip: Number of records to skip
            limit: Maximum number of records to return
            order_by: Ordering clauses

        Returns:
            Tuple of (records, total matching count)
        """
        try:
            total = await self.count(conditions)

            query = select(self.model)
            if conditions:
                query = query.where(and_(*conditions))
            if order_by:
                query = query.order_by(*order_by)
            query = query.offset(skip).limit(limit)

            result = await self.db.execute(query)
            objects = list(result.scalars().all())

            logger.debug(f"Retrieved {len(objects)} of {total} {self.model.__name__} records")
            return objects, total
        except Exception as e:
            logger.error(f"Failed to paginate {self.model.__name__} records: {e}")
            raise
