"""
User payload schemas.
"""

from typing import Optional

from pydantic import Field

from storefront.schemas.base import CamelModel
from storefront.schemas.entity import EntityRead

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(CamelModel):
    name: str = Field(..., min_length=3, max_length=100)
    email: str = Field(..., max_length=100, pattern=EMAIL_PATTERN)


class UserUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=3, max_length=100)
    email: Optional[str] = Field(default=None, max_length=100, pattern=EMAIL_PATTERN)


class UserRead(EntityRead):
    name: str
    email: str
