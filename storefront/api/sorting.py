"""
Sorting utilities for the storefront API.

This module turns sort conditions into SQLAlchemy ORDER BY clauses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import asc, desc
from sqlalchemy.sql.elements import ColumnElement

from storefront.api.filtering import ColumnMap
from storefront.errors.exceptions import InvalidSortError

DEFAULT_SORT_FIELD = "createdAt"


class SortDirection(str, Enum):
    """
    Sort direction enum.

    Attributes:
        ASC: Ascending order
        DESC: Descending order
    """

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortCondition:
    """
    Sort field definition.

    Attributes:
        field: Public field name to sort by
        direction: Sort direction (asc or desc)
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, sort_string: str) -> "SortCondition":
        """
        Parse a sort string in the ``field`` / ``-field`` format.

        Examples:
            >>> SortCondition.parse("price")
            SortCondition(field='price', direction=<SortDirection.ASC: 'asc'>)
            >>> SortCondition.parse("-price")
            SortCondition(field='price', direction=<SortDirection.DESC: 'desc'>)
        """
        if sort_string.startswith("-"):
            return cls(sort_string[1:], SortDirection.DESC)
        return cls(sort_string, SortDirection.ASC)

    def to_dict(self) -> Dict[str, str]:
        """
        Convert sort condition to dictionary.

        Returns:
            Dictionary with field and direction
        """
        return {"field": self.field, "direction": SortDirection(self.direction).value}

    def __str__(self) -> str:
        prefix = "-" if self.direction == SortDirection.DESC else ""
        return f"{prefix}{self.field}"


def default_sort() -> List[SortCondition]:
    """Most recently created first."""
    return [SortCondition(DEFAULT_SORT_FIELD, SortDirection.DESC)]


def build_sort_order(
    columns: ColumnMap,
    sorts: Sequence[SortCondition],
    tie_breaker: Optional[Any] = None,
) -> List[ColumnElement]:
    """
    Convert sort conditions into ORDER BY expressions.

    An empty sequence falls back to ``default_sort()``. When ``tie_breaker``
    (normally the primary key) is given and not already sorted on, it is
    appended in the direction of the last sort key so equal rows keep a
    stable order between pages.

    Args:
        columns: Mapping of public field name to column for the target entity
        sorts: Sort conditions, most significant first
        tie_breaker: Optional column used to break ties

    Returns:
        List of SQLAlchemy order_by expressions

    Raises:
        InvalidSortError: If a field is unknown
    """
    sorts = list(sorts) or default_sort()

    resolved = []
    for condition in sorts:
        column = columns.get(condition.field)
        if column is None:
            raise InvalidSortError(
                f"Invalid sort field: {condition.field}", field=condition.field
            )
        resolved.append((column, SortDirection(condition.direction)))

    if tie_breaker is not None and all(column is not tie_breaker for column, _ in resolved):
        resolved.append((tie_breaker, resolved[-1][1]))

    return [
        desc(column) if direction == SortDirection.DESC else asc(column)
        for column, direction in resolved
    ]
