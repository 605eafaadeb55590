"""
Composable query predicates for property listings.
Each predicate takes an optional value; a missing value contributes no restriction.
"""

from dataclasses import dataclass
from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement
from listings.models.enums import ApprovalStatus, ListingStatus, PropertyType, State
from listings.models.location import Location
from listings.models.property import Property
from listings.utils.exceptions import InvalidArgumentError
from typing import Optional, Type, TypeVar
import enum
import uuid

EnumType = TypeVar("EnumType", bound=enum.Enum)


def normalize_enum_value(enum_cls: Type[EnumType], raw: Optional[str], field: str) -> Optional[EnumType]:
    """
    Convert a free-form transport string into an enum member.

    The value is trimmed and case-normalized (first letter upper, rest lower)
    before lookup, so ``"available"`` and ``"AVAILABLE"`` both resolve to
    ``ListingStatus.AVAILABLE``.

    Args:
        enum_cls: Target enumeration
        raw: Raw value, or None
        field: Field name reported on failure

    Returns:
        Enum member, or None when no value was supplied

    Raises:
        InvalidArgumentError: If the value matches no member
    """
    if raw is None:
        return None
    if isinstance(raw, enum_cls):
        return raw

    value = str(raw).strip()
    if not value:
        return None

    try:
        return enum_cls(value.capitalize())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidArgumentError(field, f"Invalid {field} '{raw}'. Must be one of: {allowed}")


def has_status(status: Optional[ListingStatus]) -> ColumnElement[bool]:
    if status is None:
        return true()
    return Property.status == status


def has_type(property_type: Optional[PropertyType]) -> ColumnElement[bool]:
    if property_type is None:
        return true()
    return Property.type == property_type


def has_location_state(state: Optional[State]) -> ColumnElement[bool]:
    """Match on the owned location's state."""
    if state is None:
        return true()
    return Property.location.has(Location.state == state)


def has_approval_status(approval_status: ApprovalStatus) -> ColumnElement[bool]:
    return Property.approval_status == approval_status


def is_approved() -> ColumnElement[bool]:
    """Buyer-facing restriction to approved listings."""
    return has_approval_status(ApprovalStatus.APPROVED)


def has_owner(owner_id: uuid.UUID) -> ColumnElement[bool]:
    return Property.owner_id == owner_id


def combine(
    status: Optional[ListingStatus] = None,
    property_type: Optional[PropertyType] = None,
    state: Optional[State] = None
) -> ColumnElement[bool]:
    """AND together the optional listing filters."""
    return and_(
        has_status(status),
        has_type(property_type),
        has_location_state(state)
    )


@dataclass(frozen=True)
class PropertyFilterCriteria:
    """Typed filter criteria for the buyer-facing search."""

    status: Optional[ListingStatus] = None
    type: Optional[PropertyType] = None
    state: Optional[State] = None

    @classmethod
    def from_raw(
        cls,
        status: Optional[str] = None,
        type: Optional[str] = None,
        state: Optional[str] = None
    ) -> "PropertyFilterCriteria":
        """Build criteria from transport strings, normalizing case."""
        return cls(
            status=normalize_enum_value(ListingStatus, status, "status"),
            type=normalize_enum_value(PropertyType, type, "type"),
            state=normalize_enum_value(State, state, "state")
        )

    def to_predicate(self) -> ColumnElement[bool]:
        """Criteria restricted to approved listings."""
        return and_(combine(self.status, self.type, self.state), is_approved())
