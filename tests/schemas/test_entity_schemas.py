"""
Tests for entity and envelope schemas.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from storefront.schemas import DataResponse, PaginatedData
from storefront.schemas.cart_items import CartItemCreate
from storefront.schemas.products import ProductCreate, ProductRead, ProductUpdate
from storefront.schemas.users import UserCreate, UserUpdate

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


def test_accepts_camel_and_snake_case():
    assert ProductCreate(name="Pen", price=2, categoryId=1).category_id == 1
    assert ProductCreate(name="Pen", price=2, category_id=1).category_id == 1


def test_empty_description_becomes_none():
    assert ProductCreate(name="Pen", price=2, description="", categoryId=1).description is None
    assert ProductUpdate(description="").description is None
    assert ProductCreate(name="Pen", price=2, description="Blue", categoryId=1).description == "Blue"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "price": 1, "categoryId": 1},
        {"name": "x" * 101, "price": 1, "categoryId": 1},
        {"name": "Pen", "price": -1, "categoryId": 1},
        {"name": "Pen", "price": 1},
        {"name": "Pen", "price": 2**31, "categoryId": 1},
        {"name": "Pen", "price": 1, "categoryId": 2**40},
    ],
)
def test_invalid_products(payload):
    with pytest.raises(ValidationError):
        ProductCreate(**payload)


@pytest.mark.parametrize("email", ["plain", "a@b", "a b@c.de", "x" * 95 + "@ab.cd"])
def test_invalid_emails(email):
    with pytest.raises(ValidationError):
        UserCreate(name="Alice", email=email)


def test_partial_update_tracks_set_fields():
    update = UserUpdate(name="Alice")
    assert update.model_dump(exclude_unset=True) == {"name": "Alice"}


def test_cart_item_quantity_default():
    assert CartItemCreate(cartId=1, productId=2).quantity == 1
    with pytest.raises(ValidationError):
        CartItemCreate(cartId=1, productId=2, quantity=0)


def test_cart_item_ids_bounded_to_integer_range():
    assert CartItemCreate(cartId=2**31 - 1, productId=1).cart_id == 2**31 - 1
    with pytest.raises(ValidationError):
        CartItemCreate(cartId=2**31, productId=1)
    with pytest.raises(ValidationError):
        CartItemCreate(cartId=1, productId=1, quantity=10**12)


def test_paginated_envelope_is_flat_camel_case():
    product = ProductRead(
        id=1, name="Pen", price=2, categoryId=1, createdAt=NOW, updatedAt=NOW
    )
    page = PaginatedData[ProductRead](
        items=[product],
        page=1,
        page_size=10,
        total_items=1,
        total_pages=1,
        has_next=False,
        has_previous=False,
    )
    body = DataResponse[PaginatedData[ProductRead]](data=page).model_dump(
        by_alias=True, mode="json"
    )
    assert body["success"] is True
    assert set(body["data"]) == {
        "items",
        "page",
        "pageSize",
        "totalItems",
        "totalPages",
        "hasNext",
        "hasPrevious",
    }
    assert body["data"]["items"][0]["categoryId"] == 1
    assert "meta" not in body["data"]
