"""
Base exception classes for the storefront API.

This module provides a standardized exception hierarchy that is used
throughout the application. These exceptions are converted into
appropriate HTTP responses by the handlers in ``storefront.errors.handlers``.
"""

from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, Optional, Union


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: ERROR)
        status_code: HTTP status code (default: 500)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: str = "ERROR",
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppError):
    """Exception raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Union[str, int]] = None,
        code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        if resource_type and resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
            details = details or {}
            details.update({"resource_type": resource_type, "resource_id": resource_id})

        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.NOT_FOUND,
            details=details,
        )


class ConflictError(AppError):
    """Exception raised for resource conflicts (e.g., duplicate entries)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        code: str = "CONFLICT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message, code=code, status_code=HTTPStatus.CONFLICT, details=details
        )


class BadRequestError(AppError):
    """Exception raised for general client-side errors."""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.BAD_REQUEST,
            details=details,
        )


class InvalidFilterError(BadRequestError):
    """Raised when a filter names an unknown field or has a malformed value."""

    def __init__(
        self,
        message: str = "Invalid filter",
        field: Optional[str] = None,
        operator: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        if field is not None:
            details["field"] = field
        if operator is not None:
            details["operator"] = operator
        super().__init__(message=message, code="INVALID_FILTER", details=details)


class InvalidSortError(BadRequestError):
    """Raised when a sort names an unknown field."""

    def __init__(
        self,
        message: str = "Invalid sort",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        if field is not None:
            details["field"] = field
        super().__init__(message=message, code="INVALID_SORT", details=details)


class ConstraintViolation(str, Enum):
    """Kinds of integrity constraint the database can reject a write for."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"


_VIOLATION_STATUS = {
    ConstraintViolation.UNIQUE: HTTPStatus.CONFLICT,
    ConstraintViolation.FOREIGN_KEY: HTTPStatus.BAD_REQUEST,
    ConstraintViolation.NOT_NULL: HTTPStatus.BAD_REQUEST,
}


class ConstraintViolationError(AppError):
    """
    Exception raised when the database rejects a write on an integrity rule.

    Attributes:
        violation: Which kind of constraint was violated
        column: Offending column, when the driver reports it
        value: Offending value, when the driver reports it
        table: Table the constraint belongs to, when known
        constraint: Constraint name, when known
    """

    def __init__(
        self,
        violation: ConstraintViolation,
        message: Optional[str] = None,
        column: Optional[str] = None,
        value: Optional[str] = None,
        table: Optional[str] = None,
        constraint: Optional[str] = None,
    ):
        self.violation = violation
        self.column = column
        self.value = value
        self.table = table
        self.constraint = constraint

        details = {
            key: item
            for key, item in {
                "violation": violation.value,
                "column": column,
                "value": value,
                "table": table,
                "constraint": constraint,
            }.items()
            if item is not None
        }
        super().__init__(
            message=message or default_violation_message(violation, column, value),
            code=f"{violation.name}_VIOLATION",
            status_code=_VIOLATION_STATUS[violation],
            details=details,
        )


def default_violation_message(
    violation: ConstraintViolation,
    column: Optional[str] = None,
    value: Optional[str] = None,
) -> str:
    """Build the client-facing message for a constraint violation."""
    subject = f"The value {value}" if value else "The value"
    if violation is ConstraintViolation.UNIQUE:
        return f"{subject} already exists"
    if violation is ConstraintViolation.FOREIGN_KEY:
        return f"{subject} does not exist"
    return f"{column} is required" if column else "Some fields are missing"


class DBError(AppError):
    """
    Exception raised for database-related errors.
    """

    def __init__(
        self,
        message: str = "Database error",
        code: str = "DB_ERROR",
        details: Optional[dict] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details=details,
        )
