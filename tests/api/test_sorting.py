"""
Tests for the sorting module.
"""

import pytest

from storefront.api.sorting import (
    SortCondition,
    SortDirection,
    build_sort_order,
    default_sort,
)
from storefront.errors.exceptions import InvalidSortError
from storefront.models import Product

COLUMNS = {
    "id": Product.id,
    "name": Product.name,
    "price": Product.price,
    "createdAt": Product.created_at,
}


def render(clauses):
    return [str(clause) for clause in clauses]


class TestSortCondition:
    """Tests for the SortCondition class."""

    def test_parse(self):
        assert SortCondition.parse("-price") == SortCondition("price", SortDirection.DESC)
        assert SortCondition.parse("price") == SortCondition("price", SortDirection.ASC)

    def test_to_dict_and_str(self):
        condition = SortCondition("price", SortDirection.DESC)
        assert condition.to_dict() == {"field": "price", "direction": "desc"}
        assert str(condition) == "-price"

    def test_default_sort(self):
        assert default_sort() == [SortCondition("createdAt", SortDirection.DESC)]


class TestBuildSortOrder:
    """Tests for build_sort_order."""

    def test_directions(self):
        clauses = build_sort_order(
            COLUMNS,
            [SortCondition("price", SortDirection.DESC), SortCondition("name")],
        )
        assert render(clauses) == ["products.price DESC", "products.name ASC"]

    def test_empty_uses_creation_time_descending(self):
        assert render(build_sort_order(COLUMNS, [])) == ["products.created_at DESC"]

    def test_primary_key_tie_breaker_follows_last_direction(self):
        clauses = build_sort_order(
            COLUMNS, [SortCondition("price", SortDirection.DESC)], tie_breaker=Product.id
        )
        assert render(clauses) == ["products.price DESC", "products.id DESC"]

    def test_tie_breaker_not_repeated(self):
        clauses = build_sort_order(COLUMNS, [SortCondition("id")], tie_breaker=Product.id)
        assert render(clauses) == ["products.id ASC"]

    def test_unknown_field(self):
        with pytest.raises(InvalidSortError) as exc:
            build_sort_order(COLUMNS, [SortCondition("secret")])
        assert exc.value.code == "INVALID_SORT"
        assert exc.value.details == {"field": "secret"}
