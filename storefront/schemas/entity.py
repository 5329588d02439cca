"""
Fields shared by every entity read schema.
"""

from datetime import datetime

from storefront.schemas.base import CamelModel


class EntityRead(CamelModel):
    """Primary key and timestamps present on every stored row."""

    id: int
    created_at: datetime
    updated_at: datetime


class DeletedItem(CamelModel):
    """Identifier of a row that has just been deleted."""

    id: int
