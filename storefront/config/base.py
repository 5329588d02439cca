"""
Base configuration module for the storefront API.

This module provides the base settings class that the environment-specific
settings classes inherit from. It covers the application identity, database,
logging and middleware configuration.
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class BaseAppSettings(BaseSettings):
    """
    Base settings class for application configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable/disable debug mode
        VERSION: Application version string
        API_PREFIX: Path prefix under which resource routers are mounted
        DATABASE_URL: Database connection URL
        DB_ECHO: Enable SQL query logging (echo)
        DB_POOL_SIZE: Connection pool size for the database
        DB_CREATE_TABLES: Create all tables on startup
        LOG_LEVEL: Logging level name
        LOG_JSON_FORMAT: Emit logs as JSON lines
        MIDDLEWARE_CORS_OPTIONS: CORS middleware options (passed to CORSMiddleware)
        REQUEST_ID_HEADER: Header used to read and echo the request id
    """

    APP_NAME: str = Field(default="Storefront")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")
    API_PREFIX: str = Field(default="", description="Prefix for resource routes")

    # Database configuration
    DATABASE_URL: Optional[str] = Field(
        default=None, description="Database connection URL"
    )
    DB_ECHO: bool = Field(default=False, description="Enable SQL query logging (echo)")
    DB_POOL_SIZE: int = Field(
        default=5, description="Connection pool size for the database"
    )
    DB_CREATE_TABLES: bool = Field(
        default=False, description="Create all tables on application startup"
    )

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON_FORMAT: bool = Field(
        default=False, description="Output logs as JSON documents"
    )

    # Middleware configuration
    MIDDLEWARE_CORS_OPTIONS: dict = Field(
        default_factory=lambda: {
            "allow_origins": ["*"],
            "allow_credentials": True,
            "allow_methods": ["*"],
            "allow_headers": ["*"],
        },
        description="CORS middleware options (passed to CORSMiddleware)",
    )
    REQUEST_ID_HEADER: str = Field(
        default="X-Request-ID", description="Header carrying the request id"
    )

    @field_validator("DATABASE_URL", mode="before")
    def validate_database_url(cls, value):
        """
        Ensure DATABASE_URL uses asyncpg for PostgreSQL connections.
        """
        if (
            value
            and value.startswith("postgresql://")
            and not value.startswith("postgresql+asyncpg://")
        ):
            raise ValueError(
                "DATABASE_URL must start with 'postgresql+asyncpg://' for asyncpg driver. "
                "You provided a URL starting with 'postgresql://'. "
                "Please update your DATABASE_URL to use the correct format."
            )
        return value

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, value):
        """Upper-case the configured log level."""
        if isinstance(value, str):
            return value.upper()
        return value

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
