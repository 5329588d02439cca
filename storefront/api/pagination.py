"""
Pagination utilities for the storefront API.

This module provides the pure page arithmetic used by list endpoints and the
``paginate`` pipeline that runs a repository's count and page queries
concurrently.
"""

import asyncio
import logging
import math
from typing import Any, NamedTuple, Optional, Type

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.schemas.response.list import PaginatedData, PaginationMeta

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

logger = logging.getLogger(__name__)


class PaginationParams:
    """
    Requested page and page size, before normalization.

    Attributes:
        page: Page number (1-indexed)
        page_size: Number of items per page
    """

    def __init__(self, page: Optional[int] = None, page_size: Optional[int] = None):
        self.page = page
        self.page_size = page_size

    def __repr__(self) -> str:
        return f"PaginationParams(page={self.page}, page_size={self.page_size})"


class NormalizedPagination(NamedTuple):
    page: int
    page_size: int
    offset: int

    @property
    def limit(self) -> int:
        return self.page_size


def normalize_pagination(params: PaginationParams) -> NormalizedPagination:
    """
    Clamp a page request into the supported range.

    Missing values take the defaults, values below 1 become 1, and the page
    size is capped at ``MAX_PAGE_SIZE``. Never raises.

    Examples:
        >>> normalize_pagination(PaginationParams(0, 500))
        NormalizedPagination(page=1, page_size=100, offset=0)
    """
    page = max(1, DEFAULT_PAGE if params.page is None else params.page)
    page_size = DEFAULT_PAGE_SIZE if params.page_size is None else params.page_size
    page_size = min(max(1, page_size), MAX_PAGE_SIZE)
    return NormalizedPagination(page, page_size, (page - 1) * page_size)


def compute_pagination_meta(total_items: int, page: int, page_size: int) -> PaginationMeta:
    """
    Compute page counts and navigation flags.

    Args:
        total_items: Number of rows matching the query
        page: Current (normalized) page
        page_size: Current (normalized) page size

    Returns:
        PaginationMeta for the page

    Raises:
        ValueError: If page_size is not positive
    """
    if page_size < 1:
        raise ValueError("page_size must be positive")
    total_pages = math.ceil(total_items / page_size) if total_items > 0 else 0
    return PaginationMeta(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1,
    )


async def paginate(
    repository,
    session_factory: async_sessionmaker[AsyncSession],
    params: PaginationParams,
    options: Optional[Any] = None,
    schema: Optional[Type[BaseModel]] = None,
) -> PaginatedData:
    """
    Fetch one page of rows together with the pagination metadata.

    ``count`` and ``get_all`` run concurrently, each on its own session from
    ``session_factory``. If either fails the whole call fails.

    Args:
        repository: Repository exposing ``count`` and ``get_all``
        session_factory: Factory for the two sessions
        params: Requested page and page size
        options: Filters, sorts and extra predicate for both queries
        schema: Optional pydantic schema each row is validated into

    Returns:
        PaginatedData with the items and page metadata
    """
    page = normalize_pagination(params)

    async def count_rows() -> int:
        async with session_factory() as session:
            return await repository.count(session, options)

    async def fetch_rows():
        async with session_factory() as session:
            return await repository.get_all(
                session, limit=page.limit, offset=page.offset, options=options
            )

    total_items, rows = await asyncio.gather(count_rows(), fetch_rows())

    items = [schema.model_validate(row) for row in rows] if schema else list(rows)
    meta = compute_pagination_meta(total_items, page.page, page.page_size)
    logger.debug(
        f"Paginated {len(items)} of {total_items} rows (page {page.page}/{meta.total_pages})"
    )
    return PaginatedData(items=items, **meta.model_dump())
