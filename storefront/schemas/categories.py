"""
Category payload schemas.
"""

from typing import Optional

from pydantic import Field

from storefront.schemas.base import CamelModel
from storefront.schemas.entity import EntityRead


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=512)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=512)


class CategoryRead(EntityRead):
    name: str
    description: str
