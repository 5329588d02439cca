"""
Filtering utilities for the storefront API.

This module turns validated filter conditions into a single SQLAlchemy
predicate. Field names are resolved through an explicit mapping from public
field name to column, so only columns an entity chooses to expose can ever
appear in a WHERE clause.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from storefront.errors.exceptions import InvalidFilterError

Scalar = Union[str, int, float, bool]
FilterValue = Union[Scalar, List[Union[str, int, float]]]

# Public field name -> mapped column (e.g. ``{"createdAt": User.created_at}``)
ColumnMap = Mapping[str, Any]

# Range of the signed 32-bit ``Integer`` columns
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


class FilterOperator(str, Enum):
    """
    Filter operators for field comparisons.

    Attributes:
        EQ: Equal to
        NE: Not equal to
        GT: Greater than
        GTE: Greater than or equal to
        LT: Less than
        LTE: Less than or equal to
        LIKE: Case-insensitive substring match
        IN: In a list of values
        NOT_IN: Not in a list of values
    """

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"
    IN = "in"
    NOT_IN = "not_in"


LIST_OPERATORS = frozenset({FilterOperator.IN, FilterOperator.NOT_IN})


@dataclass(frozen=True)
class FilterCondition:
    """
    Filter condition for a field.

    Attributes:
        field: Public field name to filter on
        operator: Filter operator
        value: Value to compare with; a list for ``in``/``not_in``
    """

    field: str
    operator: FilterOperator
    value: FilterValue

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert filter condition to dictionary.

        Returns:
            Dictionary with field, operator, and value
        """
        return {
            "field": self.field,
            "operator": FilterOperator(self.operator).value,
            "value": self.value,
        }

    def __str__(self) -> str:
        return f"{self.field}__{FilterOperator(self.operator).value}={self.value}"


def _python_type(column: Any) -> Optional[type]:
    try:
        return column.type.python_type
    except (AttributeError, NotImplementedError):
        return None


def _normalize_utc_suffix(value: str) -> str:
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if value.endswith(("Z", "z")):
        return value[:-1] + "+00:00"
    return value


def _adapt_value(column: Any, value: Any, condition: FilterCondition) -> Any:
    """Adapt a parsed query value to the column's Python type."""
    python_type = _python_type(column)
    if python_type is None or value is None:
        return value

    if python_type is str and not isinstance(value, str):
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    if python_type is datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(_normalize_utc_suffix(value))
            except ValueError:
                pass
        raise InvalidFilterError(
            f"Invalid timestamp for filter field: {condition.field}",
            field=condition.field,
            operator=FilterOperator(condition.operator).value,
        )

    if python_type in (int, float) and isinstance(value, str):
        raise InvalidFilterError(
            f"Invalid numeric value for filter field: {condition.field}",
            field=condition.field,
            operator=FilterOperator(condition.operator).value,
        )

    if python_type is int and isinstance(value, float) and value.is_integer():
        value = int(value)

    if (
        python_type is int
        and isinstance(value, int)
        and not isinstance(value, bool)
        and not INTEGER_MIN <= value <= INTEGER_MAX
    ):
        raise InvalidFilterError(
            f"Value out of range for filter field: {condition.field}",
            field=condition.field,
            operator=FilterOperator(condition.operator).value,
        )

    return value


def _build_condition(columns: ColumnMap, condition: FilterCondition) -> ColumnElement:
    column = columns.get(condition.field)
    if column is None:
        raise InvalidFilterError(
            f"Invalid filter field: {condition.field}", field=condition.field
        )

    try:
        operator = FilterOperator(condition.operator)
    except ValueError:
        raise InvalidFilterError(
            f"Unsupported filter operator: {condition.operator}",
            field=condition.field,
            operator=str(condition.operator),
        )

    if operator in LIST_OPERATORS:
        if not isinstance(condition.value, (list, tuple)):
            raise InvalidFilterError(
                f"'{operator.value}' operator requires an array value",
                field=condition.field,
                operator=operator.value,
            )
        values = [_adapt_value(column, item, condition) for item in condition.value]
        if operator == FilterOperator.IN:
            return column.in_(values)
        return column.not_in(values)

    if isinstance(condition.value, (list, tuple)):
        raise InvalidFilterError(
            f"'{operator.value}' operator requires a single value",
            field=condition.field,
            operator=operator.value,
        )

    if operator == FilterOperator.LIKE:
        return column.ilike(f"%{condition.value}%")

    value = _adapt_value(column, condition.value, condition)
    if operator == FilterOperator.EQ:
        return column == value
    if operator == FilterOperator.NE:
        return column != value
    if operator == FilterOperator.GT:
        return column > value
    if operator == FilterOperator.GTE:
        return column >= value
    if operator == FilterOperator.LT:
        return column < value
    return column <= value


def build_filter_predicate(
    columns: ColumnMap, filters: Sequence[FilterCondition]
) -> Optional[ColumnElement]:
    """
    Convert filter conditions into one SQLAlchemy predicate.

    Conditions are ANDed together. No conditions means no filter and
    returns None.

    Args:
        columns: Mapping of public field name to column for the target entity
        filters: Conditions to apply, in order

    Returns:
        A boolean SQL expression, or None when there is nothing to filter on

    Raises:
        InvalidFilterError: If a field is unknown or a value has the wrong shape

    Example:
        ```python
        predicate = build_filter_predicate(
            {"price": Product.price},
            [FilterCondition("price", FilterOperator.GT, 100)],
        )
        stmt = select(Product).where(predicate)
        ```
    """
    if not filters:
        return None

    clauses = [_build_condition(columns, condition) for condition in filters]
    return clauses[0] if len(clauses) == 1 else and_(*clauses)
