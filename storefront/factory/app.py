"""
FastAPI application factory.

``create_app`` builds the storefront application: error handling,
middleware, the database lifecycle, the resource routers and a health check.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from storefront.config import BaseAppSettings, get_settings
from storefront.db.engine import init_db, shutdown_db
from storefront.errors import setup_errors
from storefront.logging.manager import Logger, ensure_logger
from storefront.middleware import setup_middlewares
from storefront.resources import routers


def configure_app(
    app: FastAPI, settings: BaseAppSettings, logger: Optional[Logger] = None
) -> None:
    """
    Configure a FastAPI application with error handling, middleware and routes.

    Args:
        app: The FastAPI application to configure
        settings: Application settings
        logger: Optional logger
    """
    log = ensure_logger(logger, __name__, settings)

    app.debug = settings.DEBUG

    # Configure error handling (required)
    setup_errors(app, settings, log)
    setup_middlewares(app, settings, log)

    for router in routers:
        app.include_router(router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": settings.VERSION}


def create_app(settings: Optional[BaseAppSettings] = None) -> FastAPI:
    """
    Create the storefront application.

    The database engine is created on startup and disposed on shutdown.

    Args:
        settings: Optional application settings, loaded from the environment
            when not given

    Returns:
        Configured FastAPI application
    """
    app_settings = settings or get_settings()
    logger = ensure_logger(None, "storefront", app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(app_settings, logger)
        logger.info("Database engine initialized")
        yield
        await shutdown_db(logger)
        logger.info("Database engine disposed")

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    configure_app(app, app_settings, logger)
    return app
