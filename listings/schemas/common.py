"""
Shared response schemas: pagination metadata and the standard response envelope.
"""

from pydantic import BaseModel, Field
from typing import Generic, Optional, TypeVar
from datetime import datetime, timezone

DataT = TypeVar("DataT")


class PaginationMeta(BaseModel):
    """Metadata returned alongside every paginated result."""

    total_items: int = Field(
        ...,
        ge=0,
        description="Total number of items matching the query",
        examples=[42]
    )

    total_pages: int = Field(
        ...,
        ge=0,
        description="Total number of pages",
        examples=[5]
    )

    current_page: int = Field(
        ...,
        ge=1,
        description="Current page number (1-indexed)",
        examples=[1]
    )

    page_size: int = Field(
        ...,
        ge=1,
        description="Effective page size",
        examples=[10]
    )


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard success envelope for API responses."""

    success: bool = Field(True, description="Whether the request succeeded")
    message: str = Field("Success", description="Human-readable message")
    data: Optional[DataT] = Field(None, description="Response payload")
    meta: Optional[PaginationMeta] = Field(None, description="Pagination metadata for list responses")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response timestamp"
    )
