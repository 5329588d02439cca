"""
Base response schemas.

This module provides the base response schema that all other response
schemas inherit from.
"""

from typing import Generic, Optional, TypeVar

from pydantic import Field

from storefront.schemas.base import CamelModel
from storefront.schemas.metadata import BaseMetadata

T = TypeVar("T")
M = TypeVar("M", bound=BaseMetadata)


class BaseResponse(CamelModel, Generic[T, M]):
    """
    Base schema for all API responses.

    Features:
    - Standardized envelope with success, data, metadata, and message fields
    """

    success: bool = Field(
        default=True, description="Indicates if the request was successful"
    )
    data: Optional[T] = Field(default=None, description="Response payload")
    metadata: M
    message: Optional[str] = Field(
        default=None, description="Additional context about the response"
    )
