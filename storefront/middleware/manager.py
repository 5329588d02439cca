from typing import Optional

from fastapi import FastAPI

from storefront.config.base import BaseAppSettings
from storefront.logging.manager import Logger, ensure_logger
from storefront.middleware.cors import add_cors_middleware
from storefront.middleware.request_logging import RequestLoggingMiddleware


def setup_middlewares(
    app: FastAPI,
    settings: BaseAppSettings,
    logger: Optional[Logger] = None,
) -> None:
    """
    Sets up all middlewares for the application.

    - CORS middleware (configurable via settings.MIDDLEWARE_CORS_OPTIONS)
    - Request id and access logging (header from settings.REQUEST_ID_HEADER)
    """
    log = ensure_logger(logger, __name__, settings)

    add_cors_middleware(app, settings, log)
    app.add_middleware(
        RequestLoggingMiddleware, header_name=settings.REQUEST_ID_HEADER, logger=log
    )
