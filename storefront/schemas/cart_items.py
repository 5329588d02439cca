"""
Cart item payload schemas.
"""

from typing import Optional

from pydantic import Field

from storefront.api.filtering import INTEGER_MAX
from storefront.schemas.base import CamelModel
from storefront.schemas.entity import EntityRead


class CartItemCreate(CamelModel):
    cart_id: int = Field(..., le=INTEGER_MAX)
    product_id: int = Field(..., le=INTEGER_MAX)
    quantity: int = Field(default=1, ge=1, le=INTEGER_MAX)


class CartItemUpdate(CamelModel):
    cart_id: Optional[int] = Field(default=None, le=INTEGER_MAX)
    product_id: Optional[int] = Field(default=None, le=INTEGER_MAX)
    quantity: Optional[int] = Field(default=None, ge=1, le=INTEGER_MAX)


class CartItemRead(EntityRead):
    cart_id: int
    product_id: int
    quantity: int
