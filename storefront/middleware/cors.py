"""
CORS middleware integration.

Adds CORS middleware to the application using options from settings.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config.base import BaseAppSettings
from storefront.logging.manager import Logger


def add_cors_middleware(app: FastAPI, settings: BaseAppSettings, logger: Logger):
    """
    Adds CORS middleware to the application. Options are loaded from config.

    Configured via settings.MIDDLEWARE_CORS_OPTIONS, passed to
    ``CORSMiddleware`` as keyword arguments.
    """
    cors_options = settings.MIDDLEWARE_CORS_OPTIONS
    logger.info(f"Configuring CORS middleware with options: {cors_options}")
    app.add_middleware(CORSMiddleware, **cors_options)
    logger.debug("CORS middleware added to FastAPI application.")
