"""
Pydantic schemas for request/response validation.
"""

from .common import ApiResponse, PaginationMeta

from .location import (
    LocationBase,
    LocationCreate,
    LocationUpdate,
    LocationResponse
)

from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyUpdate,
    PropertyResponse
)

from .error import APIErrorResponse, ErrorDetail, ErrorResponse

__all__ = [
    # Common
    "ApiResponse",
    "PaginationMeta",

    # Location
    "LocationBase",
    "LocationCreate",
    "LocationUpdate",
    "LocationResponse",

    # Property
    "PropertyBase",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",

    # Errors
    "APIErrorResponse",
    "ErrorDetail",
    "ErrorResponse",
]
