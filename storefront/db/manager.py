"""
FastAPI dependencies for database access.
"""

from typing import AsyncGenerator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import storefront.db.engine as db_engine
from storefront.errors.exceptions import DBError
from storefront.logging import ensure_logger


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    FastAPI dependency that provides the session factory.

    Used by list endpoints, which need more than one session per request.
    """
    if db_engine.SessionLocal is None:
        raise DBError(message="Database not initialized")
    return db_engine.SessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session is committed when the request succeeds and rolled back when
    it raises. Application and integrity errors propagate unchanged; other
    SQLAlchemy errors become ``DBError``.
    """
    log = ensure_logger(None, __name__)

    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            log.error(f"Database session error: {e}")
            raise DBError(message=str(e), details={"error": str(e)})
        except Exception:
            await session.rollback()
            raise
