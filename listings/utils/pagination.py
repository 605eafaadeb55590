"""
Pagination helpers.
Converts user-facing 1-indexed page/size into bounded store parameters and builds response metadata.
"""

from dataclasses import dataclass
from listings.config import settings
from listings.schemas.common import PaginationMeta
from typing import Optional
import math


@dataclass(frozen=True)
class PageRequest:
    """Normalized page request; ``page`` is 1-indexed."""

    page: int
    size: int

    @property
    def store_page(self) -> int:
        """0-indexed page number."""
        return self.page - 1

    @property
    def offset(self) -> int:
        return self.store_page * self.size


def normalize_pagination(
    page: Optional[int] = None,
    size: Optional[int] = None,
    default_size: Optional[int] = None,
    max_size: Optional[int] = None
) -> PageRequest:
    """
    Clamp page and size into safe bounds.

    Rules, in order: page < 1 becomes 1; size < 1 becomes the default size;
    size above the maximum becomes the maximum. Missing values take the defaults.

    Args:
        page: Requested 1-indexed page
        size: Requested page size
        default_size: Override for the configured default page size
        max_size: Override for the configured maximum page size

    Returns:
        PageRequest with effective values
    """
    default_size = default_size or settings.default_page_size
    max_size = max_size or settings.max_page_size

    page = 1 if page is None else page
    size = default_size if size is None else size

    if page < 1:
        page = 1
    if size < 1:
        size = default_size
    if size > max_size:
        size = max_size

    return PageRequest(page=page, size=size)


def build_page_meta(total_items: int, page_request: PageRequest) -> PaginationMeta:
    """Build the metadata envelope returned alongside a result page."""
    total_pages = math.ceil(total_items / page_request.size) if total_items > 0 else 0
    return PaginationMeta(
        total_items=total_items,
        total_pages=total_pages,
        current_page=page_request.page,
        page_size=page_request.size
    )
