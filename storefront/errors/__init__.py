"""
Error handling module for the storefront API.

This module provides standardized error handling including custom exceptions,
database constraint translation, error responses, and exception handlers.
"""

from storefront.errors.constraints import translate_integrity_error
from storefront.errors.exceptions import (
    AppError,
    BadRequestError,
    ConflictError,
    ConstraintViolation,
    ConstraintViolationError,
    DBError,
    InvalidFilterError,
    InvalidSortError,
    NotFoundError,
)
from storefront.errors.handlers import register_exception_handlers
from storefront.errors.manager import setup_errors

__all__ = [
    # Main setup function
    "setup_errors",
    # Handler registration
    "register_exception_handlers",
    "translate_integrity_error",
    # Exception classes
    "AppError",
    "NotFoundError",
    "ConflictError",
    "BadRequestError",
    "InvalidFilterError",
    "InvalidSortError",
    "ConstraintViolation",
    "ConstraintViolationError",
    "DBError",
]
