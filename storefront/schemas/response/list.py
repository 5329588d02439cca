"""
Paginated data schemas for list endpoints.

The pagination fields sit next to ``items`` rather than under a nested
``meta`` key:

    {"items": [...], "page": 2, "pageSize": 10, "totalItems": 25,
     "totalPages": 3, "hasNext": true, "hasPrevious": true}
"""

from typing import Generic, List, TypeVar

from pydantic import ConfigDict, Field

from storefront.schemas.base import CamelModel

T = TypeVar("T")


class PaginationMeta(CamelModel):
    """
    Pagination metadata derived from a total count and the requested page.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Maximum items per page
        total_items: Number of rows matching the query
        total_pages: ceil(total_items / page_size)
        has_next: Whether there is a page after this one
        has_previous: Whether there is a page before this one
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Maximum items per page")
    total_items: int = Field(..., description="Total number of matching items")
    total_pages: int = Field(..., description="Total number of pages")
    has_next: bool = Field(..., description="Whether there is a next page")
    has_previous: bool = Field(..., description="Whether there is a previous page")


class PaginatedData(PaginationMeta, Generic[T]):
    """One page of items together with its pagination metadata."""

    items: List[T] = Field(default_factory=list, description="Items on this page")

