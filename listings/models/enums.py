"""
Enumerations shared by the property and location models.
Values are the canonical strings stored in the database and exposed over the API.
"""

import enum


class ApprovalStatus(str, enum.Enum):
    """Workflow state of a property listing, independent of its availability."""
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"
    ARCHIVED = "archived"


class PropertyType(str, enum.Enum):
    """Kind of property being listed."""
    HOUSE = "House"
    LAND = "Land"


class ListingStatus(str, enum.Enum):
    """Availability of a listing."""
    AVAILABLE = "Available"
    RENTED = "Rented"
    SOLD = "Sold"


class State(str, enum.Enum):
    """Provinces of Nepal used as the location's administrative region."""
    KOSHI = "Koshi"
    MADHESH = "Madhesh"
    BAGMATI = "Bagmati"
    GANDAKI = "Gandaki"
    LUMBINI = "Lumbini"
    KARNALI = "Karnali"
    SUDURPASHCHIM = "Sudurpashchim"


def enum_values(enum_cls) -> list:
    """Column storage values for an enum (its values rather than member names)."""
    return [member.value for member in enum_cls]
