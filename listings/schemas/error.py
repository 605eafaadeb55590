"""
Error payload models.
Describe the error envelope in the OpenAPI document for each route.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict


class ErrorDetail(BaseModel):
    """One field-level problem, such as a bad query parameter."""

    field: Optional[str] = Field(
        None,
        description="Field name that caused the error",
        examples=["status"]
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Invalid status 'pending'. Must be one of: Available, Rented, Sold"]
    )

    type: Optional[str] = Field(
        None,
        description="Error type identifier",
        examples=["value_error"]
    )

    input: Optional[Any] = Field(
        None,
        description="Input value that caused the error"
    )


class ErrorResponse(BaseModel):
    """Body of the error envelope."""

    code: str = Field(
        ...,
        description="Error code identifier",
        examples=["PROPERTY_NOT_FOUND"]
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Property not found with id=123e4567-e89b-12d3-a456-426614174000"]
    )

    timestamp: str = Field(
        ...,
        description="Error timestamp in ISO format",
        examples=["2024-01-01T00:00:00Z"]
    )

    request_id: Optional[str] = Field(
        None,
        description="Unique request identifier for tracking",
        examples=["abc12345"]
    )

    details: Optional[List[ErrorDetail]] = Field(
        None,
        description="Detailed error information for validation errors"
    )


class APIErrorResponse(BaseModel):
    """Top-level error envelope returned by every failing request."""

    error: ErrorResponse = Field(
        ...,
        description="Error information"
    )


def _example(description: str, code: str, message: str) -> Dict[str, Any]:
    return {
        "description": description,
        "model": APIErrorResponse,
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": code,
                        "message": message,
                        "timestamp": "2024-01-01T00:00:00Z",
                        "request_id": "abc12345"
                    }
                }
            }
        }
    }


# Common error response examples for documentation
COMMON_ERROR_RESPONSES = {
    400: _example("Bad Request - Invalid argument", "INVALID_ARGUMENT", "Invalid status 'pending'"),
    404: _example("Not Found - Property does not exist", "PROPERTY_NOT_FOUND", "Property not found"),
    409: _example("Conflict - Concurrent modification or illegal transition", "CONFLICT", "Property was modified concurrently"),
    422: _example("Validation Error - Request validation failed", "VALIDATION_ERROR", "Request validation failed"),
    500: _example("Internal Server Error", "PROPERTY_SAVE_FAILED", "Failed to save property"),
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Get error response schemas for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Dictionary of error response schemas
    """
    return {
        code: COMMON_ERROR_RESPONSES[code]
        for code in status_codes
        if code in COMMON_ERROR_RESPONSES
    }


def get_list_error_responses() -> Dict[int, Dict[str, Any]]:
    """Get error response schemas for paginated list endpoints."""
    return get_error_responses(400, 500)


def get_crud_error_responses() -> Dict[int, Dict[str, Any]]:
    """Error responses shared by single-property routes."""
    return get_error_responses(400, 404, 409, 422, 500)
