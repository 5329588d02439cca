"""
Development environment specific settings.
"""

from .base import BaseAppSettings


class DevelopmentSettings(BaseAppSettings):
    """
    Settings class for development environment.

    Enables debug mode and uses a local SQLite database by default, creating
    the schema on startup.
    """

    DEBUG: bool = True
    DATABASE_URL: str = "sqlite+aiosqlite:///./dev.db"
    DB_CREATE_TABLES: bool = True
    LOG_LEVEL: str = "DEBUG"
