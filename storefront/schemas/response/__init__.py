"""
Response schemas for API endpoints.
"""

from storefront.schemas.response.base import BaseResponse
from storefront.schemas.response.data import DataResponse
from storefront.schemas.response.error import ErrorInfo, ErrorResponse
from storefront.schemas.response.list import PaginatedData, PaginationMeta

__all__ = [
    "BaseResponse",
    "DataResponse",
    "ErrorResponse",
    "ErrorInfo",
    "PaginatedData",
    "PaginationMeta",
]
