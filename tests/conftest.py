from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

import storefront.db.engine as db_engine
from storefront.config import TestingSettings
from storefront.db.engine import init_db, shutdown_db
from storefront.factory import create_app


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Keep the developer's environment out of the settings under test
    for name in ("APP_ENV", "APP_NAME", "DEBUG", "DATABASE_URL", "API_PREFIX", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def settings(tmp_path):
    """Testing settings backed by a throwaway SQLite file."""
    return TestingSettings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}",
        DB_CREATE_TABLES=True,
    )


@pytest_asyncio.fixture
async def session_factory(settings):
    """Session factory over a freshly created schema."""
    await init_db(settings)
    yield db_engine.SessionLocal
    await shutdown_db()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mock_session():
    """
    Session double for repository unit tests.

    ``execute`` is awaitable; ``begin()`` works as an async context manager
    and the session reports no open transaction.
    """
    session = MagicMock()
    session.execute = AsyncMock()
    session.in_transaction.return_value = False
    return session


def _mock_result(scalar=None, row=None):
    result = MagicMock()
    result.scalar.return_value = scalar
    result.scalar_one_or_none.return_value = row
    result.scalars.return_value.one_or_none.return_value = row
    result.scalars.return_value.all.return_value = [] if row is None else [row]
    return result


@pytest.fixture
def make_result():
    """Factory for ``execute`` results: ``scalar`` for counts, ``row`` for single rows."""
    return _mock_result

