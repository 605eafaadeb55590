"""
Utility modules for the Property Listing Service.
"""

from .exceptions import (
    APIException,
    ValidationError,
    InvalidArgumentError,
    NotFoundError,
    ConflictError,
    InternalServerError,
    PropertyNotFoundError,
    OwnerPropertyNotFoundError,
    IllegalTransitionError,
    MappingError,
    SaveError,
    FetchError,
    LocationNotFoundError,
    LocationCreationError,
    LocationSaveError
)

from .pagination import PageRequest, normalize_pagination, build_page_meta

# Dependencies and specifications are imported directly where needed to avoid circular imports

__all__ = [
    # Exceptions
    "APIException",
    "ValidationError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "InternalServerError",
    "PropertyNotFoundError",
    "OwnerPropertyNotFoundError",
    "IllegalTransitionError",
    "MappingError",
    "SaveError",
    "FetchError",
    "LocationNotFoundError",
    "LocationCreationError",
    "LocationSaveError",

    # Pagination
    "PageRequest",
    "normalize_pagination",
    "build_page_meta",
]
