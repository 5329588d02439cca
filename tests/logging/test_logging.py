"""
Unit tests for the logging module.

Covers:
- Logger creation and retrieval (get_logger, ensure_logger)
- Logger configuration (setup_logger)
- JSON formatter output (JsonFormatter)
"""
import json
import logging
import sys

import pytest

from storefront.logging import JsonFormatter, ensure_logger, get_logger, setup_logger


@pytest.fixture
def dummy_settings():
    class DummySettings:
        DEBUG = False
        LOG_LEVEL = "WARNING"
        LOG_JSON_FORMAT = True

    return DummySettings()


def test_get_logger_uses_settings(dummy_settings):
    logger = get_logger("test.settings", dummy_settings)
    assert logger.level == logging.WARNING
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_debug_forces_debug_level(dummy_settings):
    dummy_settings.DEBUG = True
    assert get_logger("test.debug", dummy_settings).level == logging.DEBUG


def test_ensure_logger_returns_existing_logger(dummy_settings):
    logger = get_logger("test.ensure", dummy_settings)
    assert ensure_logger(logger, "test.ensure", dummy_settings) is logger


def test_ensure_logger_creates_new_logger():
    ensured = ensure_logger(None, "test.ensure2")
    assert isinstance(ensured, logging.Logger)
    assert ensured.name == "test.ensure2"


def test_ensure_logger_raises_without_name():
    with pytest.raises(ValueError):
        ensure_logger()


def test_setup_logger_replaces_handlers():
    logger = setup_logger("test.handlers")
    logger = setup_logger("test.handlers")
    assert len(logger.handlers) == 1


def test_setup_logger_unknown_level_defaults_to_info():
    assert setup_logger("test.level", level="LOUD").level == logging.INFO


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("app", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.request_id = "abc-123"
    data = json.loads(JsonFormatter().format(record))
    assert data["message"] == "hello world"
    assert data["level"] == "INFO"
    assert data["logger"] == "app"
    assert data["request_id"] == "abc-123"
    assert "timestamp" in data


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord("app", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    data = json.loads(JsonFormatter().format(record))
    assert "ValueError: bad" in data["exception"]
