"""
Tests for error handlers integration with FastAPI.
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError

from storefront.errors import setup_errors
from storefront.errors.exceptions import (
    ConstraintViolation,
    ConstraintViolationError,
    DBError,
    InvalidFilterError,
    NotFoundError,
)
from storefront.errors.handlers import create_error_response


class Payload(BaseModel):
    name: str = Field(..., min_length=3)


@pytest.fixture
def client():
    app = FastAPI()
    setup_errors(app, logger=logging.getLogger("test.errors"))

    @app.get("/missing")
    async def missing():
        raise NotFoundError(resource_type="User", resource_id=9)

    @app.get("/filter")
    async def bad_filter():
        raise InvalidFilterError("Invalid filter field: secret", field="secret")

    @app.get("/db")
    async def db():
        raise DBError("connection lost")

    @app.get("/unique")
    async def unique():
        raise ConstraintViolationError(ConstraintViolation.UNIQUE, value="a@b.co")

    @app.get("/integrity")
    async def integrity():
        raise IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: users.name"))

    @app.get("/crash")
    async def crash():
        raise RuntimeError("boom")

    @app.post("/payload")
    async def payload(body: Payload):
        return body

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


def test_create_error_response_defaults():
    response = create_error_response("Nope", code="NOPE")
    assert response.success is False
    assert response.errors[0].code == "NOPE"
    assert response.errors[0].message == "Nope"


def test_not_found(client):
    resp = client.get("/missing")
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "User with id '9' not found"
    assert body["errors"][0]["code"] == "NOT_FOUND"
    assert "timestamp" in body["metadata"]


def test_invalid_filter(client):
    resp = client.get("/filter")
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert errors == [
        {
            "code": "INVALID_FILTER",
            "message": "Invalid filter field: secret",
            "field": None,
            "details": {"field": "secret"},
        }
    ]


def test_db_error(client):
    resp = client.get("/db")
    assert resp.status_code == 500
    assert resp.json()["errors"][0]["code"] == "DB_ERROR"


def test_constraint_violation(client):
    resp = client.get("/unique")
    assert resp.status_code == 409
    body = resp.json()
    assert body["message"] == "The value a@b.co already exists"
    assert body["errors"][0]["code"] == "UNIQUE_VIOLATION"


def test_stray_integrity_error_is_translated(client):
    resp = client.get("/integrity")
    assert resp.status_code == 400
    assert resp.json()["message"] == "name is required"


def test_request_validation(client):
    resp = client.post("/payload", json={"name": "x"})
    assert resp.status_code == 422
    errors = resp.json()["errors"]
    assert errors[0]["field"] == "name"
    assert errors[0]["code"] == "VALIDATION_ERROR"


def test_unhandled_exception(client):
    resp = client.get("/crash")
    assert resp.status_code == 500
    body = resp.json()
    assert body["errors"][0]["code"] == "INTERNAL_ERROR"
    assert "boom" not in body["message"]
