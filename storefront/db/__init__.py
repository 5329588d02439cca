"""
Database module for the storefront API.

This module provides the async engine lifecycle, per-request sessions, the
transaction helper and the generic repository.
"""

from storefront.db.base import Base, TimestampedModel, metadata
from storefront.db.engine import create_tables, init_db, shutdown_db
from storefront.db.manager import get_db, get_session_factory
from storefront.db.repository import BaseRepository, QueryOptions
from storefront.db.transaction import run_in_transaction

__all__ = [
    # Models
    "Base",
    "TimestampedModel",
    "metadata",
    # Lifecycle
    "init_db",
    "shutdown_db",
    "create_tables",
    # Dependencies
    "get_db",
    "get_session_factory",
    # Data access
    "BaseRepository",
    "QueryOptions",
    "run_in_transaction",
]
