"""
Per-entity whitelists of filterable and sortable fields.

Anything a client asks for that is not on the list is dropped without an
error, so list endpoints behave as if the parameter was never sent.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Mapping, Union

from storefront.api.filtering import ColumnMap, FilterCondition, FilterOperator
from storefront.api.query_parsing import ParsedQuery
from storefront.api.sorting import SortCondition

OperatorLike = Union[str, FilterOperator]

ID_OPERATORS = frozenset(
    {FilterOperator.EQ, FilterOperator.NE, FilterOperator.IN, FilterOperator.NOT_IN}
)
ORDERING_OPERATORS = frozenset(
    {FilterOperator.GT, FilterOperator.GTE, FilterOperator.LT, FilterOperator.LTE}
)
QUANTITY_OPERATORS = ID_OPERATORS | ORDERING_OPERATORS
TEXT_OPERATORS = frozenset(
    {
        FilterOperator.EQ,
        FilterOperator.NE,
        FilterOperator.LIKE,
        FilterOperator.IN,
        FilterOperator.NOT_IN,
    }
)
TIMESTAMP_OPERATORS = frozenset({FilterOperator.EQ, FilterOperator.NE}) | ORDERING_OPERATORS


@dataclass(frozen=True)
class FieldWhitelist:
    """
    Filterable fields with their allowed operators, plus the sortable fields.

    Attributes:
        filters: Public field name -> allowed operators
        sorts: Public field names that may be sorted on
    """

    filters: Mapping[str, FrozenSet[FilterOperator]]
    sorts: FrozenSet[str]

    @classmethod
    def build(
        cls,
        filters: Mapping[str, Iterable[OperatorLike]],
        sorts: Iterable[str],
    ) -> "FieldWhitelist":
        return cls(
            filters={
                name: frozenset(FilterOperator(op) for op in operators)
                for name, operators in filters.items()
            },
            sorts=frozenset(sorts),
        )

    def allows_filter(self, condition: FilterCondition) -> bool:
        allowed = self.filters.get(condition.field)
        return allowed is not None and FilterOperator(condition.operator) in allowed

    def allows_sort(self, condition: SortCondition) -> bool:
        return condition.field in self.sorts

    def apply(self, parsed: ParsedQuery) -> ParsedQuery:
        """Drop every filter and sort the whitelist does not allow."""
        return ParsedQuery(
            filters=[c for c in parsed.filters if self.allows_filter(c)],
            sorts=[c for c in parsed.sorts if self.allows_sort(c)],
        )

    def check_columns(self, columns: ColumnMap) -> None:
        """
        Verify that every whitelisted field has a column.

        Raises:
            ValueError: If a filterable or sortable field is not mapped
        """
        missing = sorted((set(self.filters) | set(self.sorts)) - set(columns))
        if missing:
            raise ValueError(f"Whitelisted fields without a column: {', '.join(missing)}")
