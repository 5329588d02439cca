"""
Database engine and session factory management.
"""

from typing import Optional

from sqlalchemy import event
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from storefront.config.base import BaseAppSettings
from storefront.db.base import metadata
from storefront.errors.exceptions import DBError
from storefront.logging import Logger, ensure_logger

# Module-level engine and session factory
engine: Optional[AsyncEngine] = None
SessionLocal: Optional[async_sessionmaker[AsyncSession]] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def init_db(settings: BaseAppSettings, logger: Optional[Logger] = None) -> None:
    """
    Initialize the database engine and session factory.

    SQLite connections get foreign key enforcement switched on. When
    ``DB_CREATE_TABLES`` is set the schema is created as well.

    Args:
        settings: Application settings
        logger: Optional logger for database operations

    Raises:
        DBError: If DATABASE_URL is not configured
    """
    global engine, SessionLocal

    log = ensure_logger(logger, __name__, settings)

    if not settings.DATABASE_URL:
        raise DBError(message="DATABASE_URL is not configured")

    log.debug(f"Creating database engine with URL: {settings.DATABASE_URL}")
    url = make_url(settings.DATABASE_URL)
    is_sqlite = url.get_backend_name() == "sqlite"

    engine_kwargs = {
        "echo": settings.DB_ECHO,
    }
    # aiosqlite does not take a pool size
    if not is_sqlite:
        engine_kwargs["pool_size"] = settings.DB_POOL_SIZE
    engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    SessionLocal = async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
    )
    log.debug("Database engine and session factory initialized")

    if settings.DB_CREATE_TABLES:
        await create_tables(log)


async def create_tables(logger: Optional[Logger] = None) -> None:
    """Create every table registered on the shared metadata."""
    log = ensure_logger(logger, __name__)

    if engine is None:
        raise DBError(message="Database not initialized")

    # Register all tables on the metadata
    import storefront.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    log.debug("Database tables created")


async def shutdown_db(logger: Optional[Logger] = None) -> None:
    """
    Dispose of the database engine.

    Args:
        logger: Optional logger for database operations
    """
    global engine, SessionLocal

    log = ensure_logger(logger, __name__)

    if engine:
        log.debug("Disposing database engine")
        await engine.dispose()
        engine = None
        SessionLocal = None
        log.debug("Database engine disposed")
