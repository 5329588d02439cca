"""
Product payload schemas.

An empty description is stored as null.
"""

from typing import Optional

from pydantic import Field, field_validator

from storefront.api.filtering import INTEGER_MAX
from storefront.schemas.base import CamelModel
from storefront.schemas.entity import EntityRead


def _empty_to_none(value):
    if isinstance(value, str) and value == "":
        return None
    return value


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    price: int = Field(..., ge=0, le=INTEGER_MAX)
    description: Optional[str] = None
    category_id: int = Field(..., le=INTEGER_MAX)

    @field_validator("description", mode="before")
    @classmethod
    def empty_description_to_none(cls, value):
        return _empty_to_none(value)


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    price: Optional[int] = Field(default=None, ge=0, le=INTEGER_MAX)
    description: Optional[str] = None
    category_id: Optional[int] = Field(default=None, le=INTEGER_MAX)

    @field_validator("description", mode="before")
    @classmethod
    def empty_description_to_none(cls, value):
        return _empty_to_none(value)


class ProductRead(EntityRead):
    name: str
    price: int
    description: Optional[str] = None
    category_id: int
