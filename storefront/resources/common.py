"""
Column and whitelist entries shared by every resource.
"""

from storefront.api.whitelist import ID_OPERATORS, TIMESTAMP_OPERATORS

TIMESTAMP_FIELDS = ("createdAt", "updatedAt")


def timestamp_columns(model) -> dict:
    return {"createdAt": model.created_at, "updatedAt": model.updated_at}


def timestamp_filters() -> dict:
    return {name: TIMESTAMP_OPERATORS for name in TIMESTAMP_FIELDS}


ID_FILTER = {"id": ID_OPERATORS}
