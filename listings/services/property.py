"""
Property workflow service for managing listings through the approval lifecycle.
Handles creation with owned locations, partial updates, approval transitions,
paginated/filtered listing and error translation.
"""

from typing import Optional, List, Tuple, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.sql.elements import ColumnElement
from listings.database import utcnow
from listings.models.enums import ApprovalStatus, ListingStatus, PropertyType, State
from listings.models.location import Location
from listings.models.property import Property
from listings.repositories.property import PropertyRepository
from listings.schemas.common import PaginationMeta
from listings.schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from listings.services.approval import ApprovalEvent, apply_transition, initial_state
from listings.services.location import LocationService
from listings.utils.exceptions import (
    APIException,
    ConflictError,
    FetchError,
    InvalidArgumentError,
    LocationCreationError,
    MappingError,
    OwnerPropertyNotFoundError,
    PropertyNotFoundError,
    SaveError
)
from listings.utils.pagination import build_page_meta, normalize_pagination
from listings.utils.specifications import PropertyFilterCriteria, has_approval_status, has_owner
import uuid
import logging

logger = logging.getLogger(__name__)

PropertyPage = Tuple[List[PropertyResponse], PaginationMeta]


class PropertyWorkflowService:
    """
    Orchestrates property listings through the approval workflow.

    Every write is a single unit of work committed once; domain errors propagate
    unchanged while unexpected write failures become ``SaveError`` and unexpected
    read failures become ``FetchError`` with the original exception chained.
    """

    def __init__(
        self,
        db_session: AsyncSession,
        property_repo: PropertyRepository,
        location_service: LocationService,
        strict_transitions: bool = False
    ):
        self.db = db_session
        self.property_repo = property_repo
        self.location_service = location_service
        self.strict_transitions = strict_transitions

    # Creation

    async def create_property(self, property_data: PropertyCreate) -> PropertyResponse:
        """
        Create a draft property together with its owned location.

        Args:
            property_data: Property creation data

        Returns:
            Created property in draft state

        Raises:
            LocationCreationError: If the location cannot be created
            MappingError: If the payload cannot be mapped to a record
            SaveError: If persisting fails
        """
        return await self._create(property_data, admin_approved=False)

    async def create_admin_approved_property(self, property_data: PropertyCreate) -> PropertyResponse:
        """Create a property that starts out approved, bypassing draft and review."""
        return await self._create(property_data, admin_approved=True)

    async def _create(self, property_data: PropertyCreate, admin_approved: bool) -> PropertyResponse:
        try:
            location = await self.location_service.create_location(property_data.location)
            property_obj = self._to_entity(property_data, location, initial_state(admin_approved))
            property_obj = await self.property_repo.add(property_obj)
            await self.db.commit()

            logger.info(
                f"Property created for owner {property_obj.owner_id}: {property_obj.title} "
                f"(ID: {property_obj.id}, approval_status: {property_obj.approval_status.value})"
            )
            return self._to_response(property_obj)

        except (LocationCreationError, MappingError):
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to create property '{property_data.title}': {e}", exc_info=True)
            raise SaveError(f"Failed to save property: {e}", cause=e) from e

    # Update

    async def update_property(self, property_id: uuid.UUID, property_data: PropertyUpdate) -> PropertyResponse:
        """
        Apply the non-null fields of a partial update.

        A nested location partial is delegated to the location service using the
        property's existing location. The owner may be repeated but never changed.

        Args:
            property_id: UUID of the property to update
            property_data: Partial property data

        Returns:
            Updated property

        Raises:
            PropertyNotFoundError: If the property doesn't exist
            InvalidArgumentError: If a different owner_id is supplied
            ConflictError: If the property was modified concurrently
            SaveError: If persisting fails
        """
        try:
            property_obj = await self._load(property_id)

            changes = {
                field: value
                for field, value in property_data.model_dump(exclude={"location"}, exclude_unset=True).items()
                if value is not None
            }

            owner_id = changes.pop("owner_id", None)
            if owner_id is not None and owner_id != property_obj.owner_id:
                raise InvalidArgumentError("owner_id", "owner_id cannot be changed after creation")

            if property_data.location is not None:
                property_obj.location = await self.location_service.update_location(
                    property_obj.location_id,
                    property_data.location
                )

            for field, value in changes.items():
                setattr(property_obj, field, value)

            property_obj.updated_at = utcnow()
            await self.property_repo.add(property_obj)
            await self.db.commit()

            logger.info(f"Property updated: {property_id} (fields: {sorted(changes)})")
            return self._to_response(property_obj)

        except APIException:
            await self.db.rollback()
            raise
        except StaleDataError as e:
            await self.db.rollback()
            raise self._conflict(property_id, e) from e
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to update property {property_id}: {e}", exc_info=True)
            raise SaveError(f"Failed to update property: {e}", cause=e) from e

    # Reads

    async def get_property(self, property_id: uuid.UUID) -> PropertyResponse:
        """
        Get a property with its owned location.

        Raises:
            PropertyNotFoundError: If the property doesn't exist
            FetchError: If the read fails
        """
        try:
            property_obj = await self._load(property_id)
            logger.debug(f"Retrieved property: {property_id}")
            return self._to_response(property_obj)

        except APIException:
            raise
        except Exception as e:
            logger.error(f"Failed to get property {property_id}: {e}", exc_info=True)
            raise FetchError(f"Failed to fetch property: {e}", cause=e) from e

    async def list_owner_properties(
        self,
        owner_id: uuid.UUID,
        page: Optional[int] = None,
        size: Optional[int] = None
    ) -> PropertyPage:
        """
        List the properties of one owner, most recently updated first.

        Raises:
            OwnerPropertyNotFoundError: If the owner has no properties at all
        """
        items, meta = await self._list(has_owner(owner_id), page, size)
        if meta.total_items == 0:
            logger.warning(f"No properties found for owner {owner_id}")
            raise OwnerPropertyNotFoundError(str(owner_id))
        return items, meta

    async def list_pending_approval(self, page: Optional[int] = None, size: Optional[int] = None) -> PropertyPage:
        """List properties waiting for review."""
        return await self._list(has_approval_status(ApprovalStatus.PENDING_APPROVAL), page, size)

    async def list_approved(self, page: Optional[int] = None, size: Optional[int] = None) -> PropertyPage:
        """List properties visible to buyers."""
        return await self._list(has_approval_status(ApprovalStatus.APPROVED), page, size)

    async def list_all(self, page: Optional[int] = None, size: Optional[int] = None) -> PropertyPage:
        """List every property regardless of approval state."""
        return await self._list(None, page, size)

    async def filter_properties(
        self,
        status: Union[ListingStatus, str, None] = None,
        type: Union[PropertyType, str, None] = None,
        state: Union[State, str, None] = None,
        page: Optional[int] = None,
        size: Optional[int] = None
    ) -> PropertyPage:
        """
        Search approved properties by optional status, type and location state.

        String values are case-normalized before lookup.

        Raises:
            InvalidArgumentError: If a value matches no known constant
        """
        criteria = PropertyFilterCriteria.from_raw(status=status, type=type, state=state)
        logger.debug(f"Filtering approved properties with {criteria}")
        return await self._list(criteria.to_predicate(), page, size)

    async def _list(
        self,
        predicate: Optional[ColumnElement[bool]],
        page: Optional[int],
        size: Optional[int]
    ) -> PropertyPage:
        page_request = normalize_pagination(page, size)
        try:
            properties, total = await self.property_repo.find_page(predicate, page_request)
            items = [self._to_response(property_obj) for property_obj in properties]
            return items, build_page_meta(total, page_request)

        except APIException:
            raise
        except Exception as e:
            logger.error(f"Failed to list properties: {e}", exc_info=True)
            raise FetchError(f"Failed to fetch properties: {e}", cause=e) from e

    # Approval transitions

    async def submit_for_approval(self, property_id: uuid.UUID) -> None:
        """Send a draft property to review."""
        await self._transition(property_id, ApprovalEvent.SUBMIT)

    async def approve_property(self, property_id: uuid.UUID) -> None:
        await self._transition(property_id, ApprovalEvent.APPROVE)

    async def reject_property(self, property_id: uuid.UUID) -> None:
        await self._transition(property_id, ApprovalEvent.REJECT)

    async def archive_property(self, property_id: uuid.UUID) -> None:
        """Withdraw an approved property from buyers."""
        await self._transition(property_id, ApprovalEvent.ARCHIVE)

    async def _transition(self, property_id: uuid.UUID, event: ApprovalEvent) -> None:
        """
        Load, apply the approval event and persist.

        Raises:
            PropertyNotFoundError: If the property doesn't exist
            IllegalTransitionError: If strict transitions are enabled and the move is illegal
            ConflictError: If the property was modified concurrently
            SaveError: If persisting fails
        """
        try:
            property_obj = await self._load(property_id)
            previous = property_obj.approval_status

            property_obj.approval_status = apply_transition(previous, event, strict=self.strict_transitions)
            property_obj.updated_at = utcnow()
            await self.property_repo.add(property_obj)
            await self.db.commit()

            logger.info(
                f"Property {property_id} {event.value}: "
                f"{previous.value} -> {property_obj.approval_status.value}"
            )

        except APIException:
            await self.db.rollback()
            raise
        except StaleDataError as e:
            await self.db.rollback()
            raise self._conflict(property_id, e) from e
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to {event.value} property {property_id}: {e}", exc_info=True)
            raise SaveError(f"Failed to {event.value} property: {e}", cause=e) from e

    # Deletion

    async def delete_property(self, property_id: uuid.UUID) -> None:
        """
        Delete a property from any approval state; its location goes with it.

        Raises:
            PropertyNotFoundError: If the property doesn't exist
            ConflictError: If the property was modified concurrently
            SaveError: If persisting fails
        """
        try:
            property_obj = await self._load(property_id)
            await self.property_repo.delete(property_obj)
            await self.db.commit()

            logger.info(f"Property deleted: {property_id}")

        except APIException:
            await self.db.rollback()
            raise
        except StaleDataError as e:
            await self.db.rollback()
            raise self._conflict(property_id, e) from e
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to delete property {property_id}: {e}", exc_info=True)
            raise SaveError(f"Failed to delete property: {e}", cause=e) from e

    # Helpers

    async def _load(self, property_id: uuid.UUID) -> Property:
        property_obj = await self.property_repo.get_with_location(property_id)
        if not property_obj:
            logger.warning(f"Property {property_id} not found")
            raise PropertyNotFoundError(str(property_id))
        return property_obj

    def _conflict(self, property_id: uuid.UUID, error: Exception) -> ConflictError:
        logger.warning(f"Concurrent modification of property {property_id}: {error}")
        return ConflictError(
            f"Property {property_id} was modified concurrently, reload and retry",
            cause=error
        )

    def _to_entity(
        self,
        property_data: PropertyCreate,
        location: Location,
        approval_status: ApprovalStatus
    ) -> Property:
        """Map a creation payload onto a new record bound to its location."""
        try:
            property_obj = Property(
                title=property_data.title,
                description=property_data.description,
                type=property_data.type,
                status=property_data.status,
                owner_id=property_data.owner_id,
                approval_status=approval_status,
                location=location
            )
            property_obj.validate_all()
            return property_obj
        except Exception as e:
            logger.error(f"Failed to map property payload: {e}", exc_info=True)
            raise MappingError(f"Failed to map property: {e}", cause=e) from e

    def _to_response(self, property_obj: Property) -> PropertyResponse:
        try:
            return PropertyResponse.model_validate(property_obj)
        except Exception as e:
            logger.error(f"Failed to map property {property_obj.id}: {e}", exc_info=True)
            raise MappingError(f"Failed to map property: {e}", cause=e) from e
