"""
Query string parsing for list endpoints.

Turns the raw query parameters of a list request into filter and sort
conditions. Filters use the ``field__operator=value`` convention, sorting
uses ``sort=field`` / ``sort=-field`` and may be repeated. The result is not
yet whitelisted; see ``storefront.api.whitelist``.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Union

from storefront.api.filtering import (
    LIST_OPERATORS,
    FilterCondition,
    FilterOperator,
    Scalar,
)
from storefront.api.sorting import SortCondition, default_sort

RawValue = Union[str, Sequence[str]]
RawQuery = Mapping[str, RawValue]

FILTER_SEPARATOR = "__"
SORT_PARAM = "sort"

_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class ParsedQuery:
    """Filter and sort conditions extracted from a query string."""

    filters: List[FilterCondition] = field(default_factory=list)
    sorts: List[SortCondition] = field(default_factory=list)


def _first(raw: RawValue) -> Optional[str]:
    if isinstance(raw, str):
        return raw
    return raw[0] if raw else None


def coerce_number(raw: str) -> Optional[Union[int, float]]:
    """
    Parse ``raw`` as a number.

    Integers stay ``int``, decimals and exponents become ``float``. Empty
    strings and non-finite values (``inf``, ``nan``) are not numbers.
    """
    text = raw.strip()
    if not text:
        return None
    if _INT_PATTERN.match(text):
        return int(text)
    if _FLOAT_PATTERN.match(text):
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def coerce_value(raw: str) -> Scalar:
    """Number if parseable, else boolean for exactly true/false, else the string."""
    number = coerce_number(raw)
    if number is not None:
        return number
    if raw == "true":
        return True
    if raw == "false":
        return False
    return raw


def coerce_list(raw: str) -> List[Union[str, int, float]]:
    """Comma-split ``raw``; each trimmed part becomes a number when parseable."""
    values: List[Union[str, int, float]] = []
    for part in raw.split(","):
        part = part.strip()
        number = coerce_number(part)
        values.append(part if number is None else number)
    return values


def parse_sort_params(sort_param: Optional[RawValue]) -> List[SortCondition]:
    """
    Parse the ``sort`` query parameter.

    Examples:
        >>> parse_sort_params("-price")
        [SortCondition(field='price', direction=<SortDirection.DESC: 'desc'>)]
        >>> parse_sort_params(None) == default_sort()
        True
    """
    if sort_param is None:
        return default_sort()
    values = [sort_param] if isinstance(sort_param, str) else list(sort_param)
    sorts = [SortCondition.parse(value) for value in values if value and value != "-"]
    return sorts or default_sort()


def parse_filter_params(query: RawQuery) -> List[FilterCondition]:
    """
    Parse ``field__operator`` keys into filter conditions.

    Keys without exactly one ``__`` separator, with an empty field name or
    with an unknown operator are skipped.
    """
    filters: List[FilterCondition] = []
    for key, raw in query.items():
        parts = key.split(FILTER_SEPARATOR)
        if len(parts) != 2 or not parts[0]:
            continue
        field_name, operator_name = parts
        try:
            operator = FilterOperator(operator_name)
        except ValueError:
            continue

        value = _first(raw)
        if value is None:
            continue
        if operator in LIST_OPERATORS:
            filters.append(FilterCondition(field_name, operator, coerce_list(value)))
        else:
            filters.append(FilterCondition(field_name, operator, coerce_value(value)))
    return filters


def parse_query_params(query: RawQuery) -> ParsedQuery:
    """Parse both the filters and the sort of a list request."""
    return ParsedQuery(
        filters=parse_filter_params(query),
        sorts=parse_sort_params(query.get(SORT_PARAM)),
    )


def query_params_to_dict(params) -> Dict[str, RawValue]:
    """
    Flatten a Starlette ``QueryParams`` multi-dict.

    Keys given once map to their string value, repeated keys to the list of
    all their values.
    """
    result: Dict[str, RawValue] = {}
    for key in params.keys():
        values = params.getlist(key)
        result[key] = values[0] if len(values) == 1 else values
    return result
