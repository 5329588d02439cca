"""
FastAPI dependencies for list endpoints.

``list_query`` reads the page, page size, filters and sort from the query
string, drops whatever the resource's whitelist does not allow, and hands the
route a typed ``ListQuery``.
"""

from typing import Callable, List, Optional, Sequence

from fastapi import Query, Request
from sqlalchemy.sql.elements import ColumnElement

from storefront.api.filtering import FilterCondition
from storefront.api.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, PaginationParams
from storefront.api.query_parsing import parse_query_params, query_params_to_dict
from storefront.api.sorting import SortCondition
from storefront.api.whitelist import FieldWhitelist
from storefront.db.repository import QueryOptions


class ListQuery:
    """
    Validated list request.

    Attributes:
        page: Requested page, not yet clamped
        page_size: Requested page size, not yet clamped
        filters: Whitelisted filter conditions
        sorts: Whitelisted sort conditions
    """

    def __init__(
        self,
        page: int,
        page_size: int,
        filters: Sequence[FilterCondition],
        sorts: Sequence[SortCondition],
    ):
        self.page = page
        self.page_size = page_size
        self.filters: List[FilterCondition] = list(filters)
        self.sorts: List[SortCondition] = list(sorts)

    @property
    def pagination(self) -> PaginationParams:
        return PaginationParams(page=self.page, page_size=self.page_size)

    def options(self, where: Optional[ColumnElement] = None) -> QueryOptions:
        """Build repository options, optionally scoped by an extra predicate."""
        return QueryOptions(filters=self.filters, sorts=self.sorts, where=where)

    def __repr__(self) -> str:
        return (
            f"ListQuery(page={self.page}, page_size={self.page_size}, "
            f"filters={[str(f) for f in self.filters]}, sorts={[str(s) for s in self.sorts]})"
        )


def list_query(whitelist: FieldWhitelist) -> Callable[..., ListQuery]:
    """
    Create a dependency parsing list parameters against ``whitelist``.

    Example:
        ```python
        @router.get("")
        async def list_users(query: ListQuery = Depends(list_query(USER_WHITELIST))):
            ...
        ```
    """

    def dependency(
        request: Request,
        page: int = Query(DEFAULT_PAGE, description="Page number (1-indexed)"),
        page_size: int = Query(
            DEFAULT_PAGE_SIZE, alias="pageSize", description="Items per page (max 100)"
        ),
        sort: Optional[List[str]] = Query(
            None, description="Sort fields; prefix with '-' for descending"
        ),
    ) -> ListQuery:
        parsed = parse_query_params(query_params_to_dict(request.query_params))
        allowed = whitelist.apply(parsed)
        return ListQuery(page, page_size, allowed.filters, allowed.sorts)

    return dependency
