"""
Query layer of the storefront API.

Filtering, sorting, query-string parsing, field whitelists and pagination.
The FastAPI glue lives in ``storefront.api.dependencies`` and
``storefront.api.router``.
"""

from storefront.api.filtering import (
    FilterCondition,
    FilterOperator,
    build_filter_predicate,
)
from storefront.api.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginationParams,
    compute_pagination_meta,
    normalize_pagination,
    paginate,
)
from storefront.api.query_parsing import (
    ParsedQuery,
    parse_filter_params,
    parse_query_params,
    parse_sort_params,
    query_params_to_dict,
)
from storefront.api.sorting import SortCondition, SortDirection, build_sort_order
from storefront.api.whitelist import FieldWhitelist

__all__ = [
    # Filtering
    "FilterCondition",
    "FilterOperator",
    "build_filter_predicate",
    # Sorting
    "SortCondition",
    "SortDirection",
    "build_sort_order",
    # Parsing
    "ParsedQuery",
    "parse_filter_params",
    "parse_query_params",
    "parse_sort_params",
    "query_params_to_dict",
    "FieldWhitelist",
    # Pagination
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PaginationParams",
    "compute_pagination_meta",
    "normalize_pagination",
    "paginate",
]
