"""
Translation of database integrity errors into client-facing exceptions.

Postgres reports the violated rule through its SQLSTATE code and a detail
line such as ``Key (email)=(a@b.c) already exists.``; SQLite only through
the message text. Both are mapped onto ``ConstraintViolationError``.
"""

import re
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError

from storefront.errors.exceptions import (
    AppError,
    ConflictError,
    ConstraintViolation,
    ConstraintViolationError,
)

PG_ERROR_CODES = {
    "23505": ConstraintViolation.UNIQUE,
    "23503": ConstraintViolation.FOREIGN_KEY,
    "23502": ConstraintViolation.NOT_NULL,
}

_SQLITE_PREFIXES = {
    "UNIQUE constraint failed": ConstraintViolation.UNIQUE,
    "FOREIGN KEY constraint failed": ConstraintViolation.FOREIGN_KEY,
    "NOT NULL constraint failed": ConstraintViolation.NOT_NULL,
}

_PARENS = re.compile(r"\((.*?)\)")
_QUOTED = re.compile(r'"([^"]+)"')
_PG_NOT_NULL = re.compile(
    r'null value in column "(?P<column>[^"]+)"(?: of relation "(?P<table>[^"]+)")?'
)
_SQLITE_COLUMN = re.compile(r"constraint failed: (?P<table>\w+)\.(?P<column>\w+)")

GENERIC_MESSAGE = "Something went wrong! Please try again later."


def parse_postgres_detail(detail: str) -> Optional[Dict[str, Optional[str]]]:
    """
    Pull column, value and table out of a Postgres error detail line.

    ``Key (category_id)=(7) is not present in table "categories".`` yields
    ``{"column": "category_id", "value": "7", "table": "categories"}``.
    Returns None when the line does not carry a key/value pair.
    """
    parens = _PARENS.findall(detail)
    if len(parens) < 2:
        return None
    quoted = _QUOTED.search(detail)
    return {
        "column": parens[0] or None,
        "value": parens[1] or None,
        "table": quoted.group(1) if quoted else None,
    }


def _sqlstate(orig: Any) -> Optional[str]:
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return str(code)
    return None


def _driver_attr(orig: Any, name: str) -> Optional[str]:
    # asyncpg errors arrive wrapped by SQLAlchemy's DBAPI adapter
    value = getattr(orig, name, None)
    if value is None:
        value = getattr(getattr(orig, "__cause__", None), name, None)
    return value if isinstance(value, str) else None


def _postgres_violation(orig: Any, code: str) -> ConstraintViolationError:
    violation = PG_ERROR_CODES[code]
    column = _driver_attr(orig, "column_name")
    table = _driver_attr(orig, "table_name")
    constraint = _driver_attr(orig, "constraint_name")
    value = None

    detail = _driver_attr(orig, "detail")
    if detail is None:
        diag = getattr(orig, "diag", None)
        detail = getattr(diag, "message_detail", None)
    parsed = parse_postgres_detail(detail) if detail else None
    if parsed:
        column = column or parsed["column"]
        value = parsed["value"]
        table = table or parsed["table"]

    if violation is ConstraintViolation.NOT_NULL and column is None:
        match = _PG_NOT_NULL.search(str(orig))
        if match:
            column = match.group("column")
            table = table or match.group("table")

    return ConstraintViolationError(
        violation, column=column, value=value, table=table, constraint=constraint
    )


def _sqlite_violation(message: str) -> Optional[ConstraintViolationError]:
    for prefix, violation in _SQLITE_PREFIXES.items():
        if prefix in message:
            match = _SQLITE_COLUMN.search(message)
            return ConstraintViolationError(
                violation,
                column=match.group("column") if match else None,
                table=match.group("table") if match else None,
            )
    return None


def translate_integrity_error(exc: IntegrityError) -> AppError:
    """
    Convert a SQLAlchemy ``IntegrityError`` into an application error.

    Unique, foreign-key and not-null violations become
    ``ConstraintViolationError`` with whatever column/value information the
    driver exposes. Any other integrity failure becomes a ``ConflictError``
    with a generic message.
    """
    orig = exc.orig
    code = _sqlstate(orig)
    if code in PG_ERROR_CODES:
        return _postgres_violation(orig, code)

    translated = _sqlite_violation(str(orig))
    if translated is not None:
        return translated

    return ConflictError(message=GENERIC_MESSAGE, code="CONSTRAINT_VIOLATION")
