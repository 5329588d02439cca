"""
Configuration module for the storefront API.

This module provides:
- BaseAppSettings: The base class for application settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables:

APP_NAME="Storefront"
APP_ENV="development"  # Options: development, testing, production
DEBUG=true
API_PREFIX="/api"
DATABASE_URL="postgresql+asyncpg://<username>:<password>@<host>:<port>/<database_name>"
DB_ECHO=false
DB_POOL_SIZE=5
DB_CREATE_TABLES=false
LOG_LEVEL="INFO"
LOG_JSON_FORMAT=false
MIDDLEWARE_CORS_OPTIONS='{"allow_origins":["http://localhost:3000"],"allow_credentials":true,"allow_methods":["*"],"allow_headers":["*"]}'
"""

from .base import BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseAppSettings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
    "get_settings",
]
