"""
End-to-end tests through the HTTP surface.

Covers:
- App factory, startup and health check
- CRUD endpoints and the response envelope
- Paginated, filtered and sorted listing
- Error responses for constraint violations, missing rows and bad queries

The app runs against a temporary SQLite file created by the lifespan.
"""

import pytest

import storefront.db.engine as db_engine
from storefront.models import Cart, Order


def create(client, path, payload):
    resp = client.post(path, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def insert_row(client, model, **values):
    """Insert a row for a table that has no endpoint, on the app's own loop."""

    async def insert():
        async with db_engine.SessionLocal() as session:
            row = model(**values)
            session.add(row)
            await session.commit()
            return row.id

    return client.portal.call(insert)


@pytest.fixture
def users(client):
    return [
        create(client, "/users", {"name": f"User {i:02d}", "email": f"user{i:02d}@example.com"})
        for i in range(25)
    ]


@pytest.fixture
def catalog(client):
    books = create(client, "/categories", {"name": "Books", "description": "Paper"})
    games = create(client, "/categories", {"name": "Games", "description": "Fun"})
    products = [
        create(client, "/products", {"name": "Atlas", "price": 300, "categoryId": books["id"]}),
        create(client, "/products", {"name": "Bible", "price": 100, "categoryId": books["id"]}),
        create(client, "/products", {"name": "Chess", "price": 50, "categoryId": games["id"]}),
    ]
    return {"books": books, "games": games, "products": products}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_request_id_header(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc"})
    assert resp.headers["X-Request-ID"] == "abc"


class TestUsers:
    """User CRUD and list behaviour."""

    def test_second_page_of_25(self, client, users):
        resp = client.get("/users", params={"page": 2, "pageSize": 10})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        data = body["data"]
        assert len(data["items"]) == 10
        assert data["page"] == 2
        assert data["pageSize"] == 10
        assert data["totalItems"] == 25
        assert data["totalPages"] == 3
        assert data["hasNext"] is True
        assert data["hasPrevious"] is True

    def test_default_page_is_newest_first(self, client, users):
        data = client.get("/users").json()["data"]
        assert data["pageSize"] == 10
        assert data["items"][0]["id"] == users[-1]["id"]

    def test_page_size_is_clamped(self, client, users):
        data = client.get("/users", params={"pageSize": 500, "page": 0}).json()["data"]
        assert data["pageSize"] == 100
        assert data["page"] == 1
        assert len(data["items"]) == 25

    def test_non_numeric_page_is_rejected(self, client):
        resp = client.get("/users", params={"page": "abc"})
        assert resp.status_code == 422
        assert resp.json()["errors"][0]["code"] == "VALIDATION_ERROR"

    def test_filter_and_sort(self, client, users):
        resp = client.get("/users", params={"name__like": "user 1", "sort": "-name"})
        names = [item["name"] for item in resp.json()["data"]["items"]]
        assert names == [f"User {i:02d}" for i in range(19, 9, -1)]

    def test_in_filter(self, client, users):
        ids = f"{users[0]['id']},{users[1]['id']}"
        resp = client.get("/users", params={"id__in": ids, "sort": "id"})
        assert [item["id"] for item in resp.json()["data"]["items"]] == [
            users[0]["id"],
            users[1]["id"],
        ]

    def test_invalid_timestamp_filter(self, client, users):
        resp = client.get("/users", params={"createdAt__gt": "yesterday"})
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["code"] == "INVALID_FILTER"

    def test_oversized_integer_filter(self, client, users):
        resp = client.get("/users", params={"id__eq": "99999999999999999999"})
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["code"] == "INVALID_FILTER"

    def test_zero_page_size_becomes_one(self, client, users):
        data = client.get("/users", params={"pageSize": 0}).json()["data"]
        assert data["pageSize"] == 1
        assert len(data["items"]) == 1
        assert data["totalPages"] == 25

    def test_get_and_projection(self, client, users):
        user_id = users[0]["id"]
        full = client.get(f"/users/{user_id}").json()["data"]
        assert full["email"] == "user00@example.com"
        assert {"id", "name", "email", "createdAt", "updatedAt"} <= set(full)

        projected = client.get(f"/users/{user_id}", params={"fields": "name,email"})
        assert projected.json()["data"] == {"name": "User 00", "email": "user00@example.com"}

    def test_projection_of_unknown_field(self, client, users):
        resp = client.get(f"/users/{users[0]['id']}", params={"fields": "password"})
        assert resp.status_code == 400

    def test_get_twice_is_equal(self, client, users):
        first = client.get(f"/users/{users[3]['id']}").json()["data"]
        second = client.get(f"/users/{users[3]['id']}").json()["data"]
        assert first == second

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_missing_user(self, client, method):
        resp = getattr(client, method)("/users/9999")
        assert resp.status_code == 404
        assert resp.json()["errors"][0]["code"] == "NOT_FOUND"

    @pytest.mark.parametrize("method", ["get", "delete"])
    @pytest.mark.parametrize("user_id", ["99999999999999999999", "0", "-3"])
    def test_out_of_range_id(self, client, method, user_id):
        resp = getattr(client, method)(f"/users/{user_id}")
        assert resp.status_code == 422
        assert resp.json()["errors"][0]["field"] == "path.item_id"

    def test_update_missing_user(self, client):
        resp = client.put("/users/9999", json={"name": "Nobody"})
        assert resp.status_code == 404

    def test_duplicate_email(self, client, users):
        resp = client.post("/users", json={"name": "Clone", "email": "user00@example.com"})
        assert resp.status_code == 409
        assert resp.json()["errors"][0]["code"] == "UNIQUE_VIOLATION"

    def test_invalid_payload(self, client):
        resp = client.post("/users", json={"name": "Al", "email": "not-an-email"})
        assert resp.status_code == 422
        fields = {error["field"] for error in resp.json()["errors"]}
        assert fields == {"name", "email"}

    def test_update_and_delete(self, client, users):
        user_id = users[0]["id"]
        resp = client.put(f"/users/{user_id}", json={"name": "Renamed"})
        assert resp.status_code == 200
        assert resp.json()["data"]["name"] == "Renamed"
        assert resp.json()["data"]["email"] == "user00@example.com"

        resp = client.delete(f"/users/{user_id}")
        assert resp.json()["data"] == {"id": user_id}
        assert client.get(f"/users/{user_id}").status_code == 404

    def test_empty_update(self, client, users):
        resp = client.put(f"/users/{users[0]['id']}", json={})
        assert resp.status_code == 400


class TestCatalog:
    """Categories and products."""

    def test_empty_description_stored_as_null(self, client, catalog):
        product = create(
            client,
            "/products",
            {"name": "Pen", "price": 2, "description": "", "categoryId": catalog["books"]["id"]},
        )
        assert product["description"] is None

    def test_null_required_field(self, client, catalog):
        product_id = catalog["products"][0]["id"]
        resp = client.put(f"/products/{product_id}", json={"name": None})
        assert resp.status_code == 400
        body = resp.json()
        assert body["errors"][0]["code"] == "NOT_NULL_VIOLATION"
        assert body["message"] == "name is required"

    def test_unknown_category(self, client):
        resp = client.post("/products", json={"name": "Orphan", "price": 1, "categoryId": 999})
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["code"] == "FOREIGN_KEY_VIOLATION"

    def test_price_filter(self, client, catalog):
        resp = client.get("/products", params={"price__gte": 100, "sort": "price"})
        assert [p["name"] for p in resp.json()["data"]["items"]] == ["Bible", "Atlas"]

    def test_non_whitelisted_operator_is_ignored(self, client, catalog):
        filtered = client.get("/products", params={"price__in": "50"}).json()["data"]
        unfiltered = client.get("/products").json()["data"]
        assert filtered["items"] == unfiltered["items"]

    def test_category_products(self, client, catalog):
        books = catalog["books"]["id"]
        resp = client.get(f"/categories/{books}/products", params={"sort": "-price"})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert [p["name"] for p in data["items"]] == ["Atlas", "Bible"]
        assert data["totalItems"] == 2

    def test_category_products_filtered(self, client, catalog):
        books = catalog["books"]["id"]
        resp = client.get(f"/categories/{books}/products", params={"price__lt": 200})
        assert [p["name"] for p in resp.json()["data"]["items"]] == ["Bible"]

    def test_products_of_missing_category(self, client):
        assert client.get("/categories/9999/products").status_code == 404

    def test_products_of_out_of_range_category(self, client):
        resp = client.get("/categories/99999999999999999999/products")
        assert resp.status_code == 422

    def test_oversized_price_payload(self, client, catalog):
        resp = client.post(
            "/products",
            json={"name": "Gold", "price": 2**40, "categoryId": catalog["books"]["id"]},
        )
        assert resp.status_code == 422


class TestCartAndOrderItems:
    """Cart and order item endpoints."""

    @pytest.fixture
    def cart_items(self, client, catalog, users):
        cart_id = insert_row(client, Cart, user_id=users[0]["id"])
        return [
            create(
                client,
                "/cart-items",
                {"cartId": cart_id, "productId": product["id"], "quantity": quantity},
            )
            for product, quantity in zip(catalog["products"], [1, 3, 5])
        ]

    def test_non_whitelisted_filter_matches_no_filter(self, client, cart_items):
        unfiltered = client.get("/cart-items").json()["data"]
        filtered = client.get("/cart-items", params={"createdBy__eq": "someone"}).json()["data"]
        assert filtered == unfiltered
        assert filtered["totalItems"] == 3

    def test_quantity_filter(self, client, cart_items):
        resp = client.get("/cart-items", params={"quantity__gte": 3, "sort": "quantity"})
        assert [item["quantity"] for item in resp.json()["data"]["items"]] == [3, 5]

    def test_quantity_defaults_to_one(self, client, cart_items, catalog):
        create(client, "/products", {"name": "Dice", "price": 5, "categoryId": catalog["games"]["id"]})
        product_id = client.get("/products", params={"name__eq": "Dice"}).json()["data"]["items"][0]["id"]
        item = create(
            client, "/cart-items", {"cartId": cart_items[0]["cartId"], "productId": product_id}
        )
        assert item["quantity"] == 1

    def test_same_product_twice(self, client, cart_items):
        resp = client.post(
            "/cart-items",
            json={"cartId": cart_items[0]["cartId"], "productId": cart_items[0]["productId"]},
        )
        assert resp.status_code == 409

    def test_zero_quantity_rejected(self, client, cart_items):
        resp = client.put(f"/cart-items/{cart_items[0]['id']}", json={"quantity": 0})
        assert resp.status_code == 422

    def test_ordered_product_cannot_be_deleted(self, client, catalog, users):
        order_id = insert_row(client, Order, user_id=users[0]["id"])
        product_id = catalog["products"][0]["id"]
        item = create(client, "/order-items", {"orderId": order_id, "productId": product_id})
        assert item["quantity"] == 1

        resp = client.delete(f"/products/{product_id}")
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["code"] == "FOREIGN_KEY_VIOLATION"

        listed = client.get("/order-items", params={"orderId__eq": order_id}).json()["data"]
        assert [i["id"] for i in listed["items"]] == [item["id"]]
