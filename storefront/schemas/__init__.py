"""
Common schemas for the storefront API.

This module provides reusable pydantic schemas for API responses and metadata.
Entity payload schemas live in the per-entity modules of this package.
"""

from storefront.schemas.base import CamelModel
from storefront.schemas.metadata import BaseMetadata, ResponseMetadata
from storefront.schemas.response import (
    BaseResponse,
    DataResponse,
    ErrorInfo,
    ErrorResponse,
    PaginatedData,
    PaginationMeta,
)

__all__ = [
    "CamelModel",
    # Metadata schemas
    "BaseMetadata",
    "ResponseMetadata",
    # Response schemas
    "BaseResponse",
    "DataResponse",
    "ErrorResponse",
    "ErrorInfo",
    "PaginatedData",
    "PaginationMeta",
]
