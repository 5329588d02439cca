"""
Tests for the middleware setup and request logging.
"""

import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from storefront.config import TestingSettings
from storefront.middleware import RequestLoggingMiddleware, setup_middlewares


@pytest.fixture
def app():
    app = FastAPI()
    setup_middlewares(app, TestingSettings(_env_file=None), logging.getLogger("test.mw"))

    @app.get("/ping")
    async def ping(request: Request):
        return {"request_id": request.state.request_id}

    return app


def test_generates_request_id(app):
    with TestClient(app) as client:
        resp = client.get("/ping")
    request_id = resp.headers["X-Request-ID"]
    assert request_id
    assert resp.json() == {"request_id": request_id}


def test_echoes_client_request_id(app):
    with TestClient(app) as client:
        resp = client.get("/ping", headers={"X-Request-ID": "req-42"})
    assert resp.headers["X-Request-ID"] == "req-42"
    assert resp.json() == {"request_id": "req-42"}


def test_logs_request(app, caplog):
    with caplog.at_level(logging.INFO, logger="test.mw"):
        with TestClient(app) as client:
            client.get("/ping", headers={"X-Request-ID": "req-7"})
    record = next(r for r in caplog.records if getattr(r, "request_id", None) == "req-7")
    assert record.method == "GET"
    assert record.path == "/ping"
    assert record.status_code == 200


def test_cors_headers(app):
    with TestClient(app) as client:
        resp = client.options(
            "/ping",
            headers={"Origin": "http://example.com", "Access-Control-Request-Method": "GET"},
        )
    assert resp.status_code == 200
    assert "access-control-allow-origin" in resp.headers


def test_custom_header_name():
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware, header_name="X-Trace")

    @app.get("/ping")
    async def ping():
        return {}

    with TestClient(app) as client:
        resp = client.get("/ping", headers={"X-Trace": "t-1"})
    assert resp.headers["X-Trace"] == "t-1"
