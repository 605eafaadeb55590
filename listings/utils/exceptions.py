"""
Custom exception classes for the Property Listing Service.
Provides structured error handling with stable error codes and HTTP status codes.
"""

from typing import Any, Dict, Optional, List
from fastapi import HTTPException, status

# Renamed from HTTP_422_UNPROCESSABLE_ENTITY in newer Starlette releases
HTTP_422_UNPROCESSABLE = getattr(status, "HTTP_422_UNPROCESSABLE_CONTENT", 422)


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code
        self.cause = cause

    def __str__(self) -> str:
        return self.detail


class ValidationError(APIException):
    """Validation error exception."""

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
        error_code: str = "VALIDATION_ERROR",
        status_code: int = HTTP_422_UNPROCESSABLE,
        cause: Optional[BaseException] = None
    ):
        super().__init__(
            status_code=status_code,
            detail=detail,
            error_code=error_code,
            cause=cause
        )
        self.field_errors = field_errors or []


class InvalidArgumentError(ValidationError):
    """A caller-supplied argument (filter value, immutable field) is not acceptable."""

    def __init__(self, field: str, detail: str):
        super().__init__(
            detail=detail,
            field_errors=[{"field": field, "message": detail}],
            error_code="INVALID_ARGUMENT",
            status_code=status.HTTP_400_BAD_REQUEST
        )
        self.field = field


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[str] = None, error_code: str = "NOT_FOUND"):
        detail = f"{resource} not found"
        if resource_id:
            detail += f" with id={resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=error_code
        )


class ConflictError(APIException):
    """Resource conflict exception."""

    def __init__(self, detail: str, error_code: str = "CONFLICT", cause: Optional[BaseException] = None):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=error_code,
            cause=cause
        )


class InternalServerError(APIException):
    """Internal server error exception."""

    def __init__(
        self,
        detail: str = "Internal server error",
        error_code: str = "INTERNAL_SERVER_ERROR",
        cause: Optional[BaseException] = None
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code=error_code,
            cause=cause
        )


# Property specific exceptions
class PropertyNotFoundError(NotFoundError):
    """Property not found exception."""

    def __init__(self, property_id: str):
        super().__init__("Property", str(property_id), error_code="PROPERTY_NOT_FOUND")


class OwnerPropertyNotFoundError(NotFoundError):
    """Owner has no properties."""

    def __init__(self, owner_id: str):
        super().__init__("Properties", None, error_code="OWNER_PROPERTY_NOT_FOUND")
        self.detail = f"No properties found for owner_id={owner_id}"


class IllegalTransitionError(ConflictError):
    """Approval transition not allowed from the current state."""

    def __init__(self, current: str, event: str):
        super().__init__(
            f"Cannot {event} a property in '{current}' state",
            error_code="ILLEGAL_TRANSITION"
        )
        self.current = current
        self.event = event


class MappingError(InternalServerError):
    """Translation between records and API representations failed."""

    def __init__(self, detail: str = "Failed to map property", cause: Optional[BaseException] = None):
        super().__init__(detail, error_code="PROPERTY_MAPPING_FAILED", cause=cause)


class SaveError(InternalServerError):
    """Persistence write failure."""

    def __init__(self, detail: str = "Failed to save property", cause: Optional[BaseException] = None):
        super().__init__(detail, error_code="PROPERTY_SAVE_FAILED", cause=cause)


class FetchError(InternalServerError):
    """Persistence read failure."""

    def __init__(self, detail: str = "Failed to fetch properties", cause: Optional[BaseException] = None):
        super().__init__(detail, error_code="PROPERTY_FETCH_FAILED", cause=cause)


# Location specific exceptions
class LocationNotFoundError(NotFoundError):
    """Location not found exception."""

    def __init__(self, location_id: Any):
        super().__init__("Location", str(location_id), error_code="LOCATION_NOT_FOUND")


class LocationCreationError(ValidationError):
    """Location could not be created for a new property."""

    def __init__(self, detail: str = "Failed to create location", cause: Optional[BaseException] = None):
        super().__init__(
            detail=detail,
            error_code="LOCATION_CREATION_FAILED",
            status_code=status.HTTP_400_BAD_REQUEST,
            cause=cause
        )


class LocationSaveError(InternalServerError):
    """Location update failure."""

    def __init__(self, detail: str = "Failed to update location", cause: Optional[BaseException] = None):
        super().__init__(detail, error_code="LOCATION_SAVE_FAILED", cause=cause)
