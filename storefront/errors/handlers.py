"""
Exception handlers for the storefront API.

This module provides exception handlers that convert application exceptions
into standardized API responses using the schemas module.
"""

import traceback
from functools import partial
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from storefront.errors.constraints import translate_integrity_error
from storefront.errors.exceptions import AppError
from storefront.logging import Logger, ensure_logger
from storefront.schemas import ErrorInfo, ErrorResponse
from storefront.schemas.metadata import ResponseMetadata


def create_error_response(
    message: str,
    code: str = "ERROR",
    errors: Optional[List[ErrorInfo]] = None,
    metadata: Optional[ResponseMetadata] = None,
) -> ErrorResponse:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Error code identifier
        errors: Detailed error information list
        metadata: Additional metadata for the response

    Returns:
        Standardized error response
    """
    return ErrorResponse(
        success=False,
        message=message,
        errors=errors or [ErrorInfo(code=code, message=message)],
        metadata=metadata or ResponseMetadata(),
    )


def _create_validation_errors(
    errors_data: List[Dict[str, Any]], exclude_body: bool = False
) -> List[ErrorInfo]:
    """
    Create a list of ErrorInfo objects from validation errors data.

    Args:
        errors_data: List of error dictionaries
        exclude_body: Whether to exclude 'body' from location paths

    Returns:
        List of ErrorInfo objects
    """
    errors = []

    for error in errors_data:
        loc = error.get("loc", [])

        if exclude_body:
            field_path = ".".join([str(item) for item in loc if item != "body"])
        else:
            field_path = ".".join([str(item) for item in loc])

        errors.append(
            ErrorInfo(
                code="VALIDATION_ERROR",
                message=error.get("msg", "Validation error"),
                field=field_path,
            )
        )

    return errors


def _render(exc: AppError) -> JSONResponse:
    errors = [ErrorInfo(code=exc.code, message=exc.message, details=exc.details or None)]

    response = create_error_response(message=exc.message, code=exc.code, errors=errors)
    return JSONResponse(
        status_code=int(exc.status_code),
        content=jsonable_encoder(response, by_alias=True),
    )


async def app_error_handler(
    request: Request, exc: AppError, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Handler for AppError and its subclasses.

    Server-side errors (5xx) are logged; client errors are not.
    """
    if exc.status_code >= 500:
        log = ensure_logger(logger, __name__)
        log.error(f"{exc.code}: {exc.message}", extra={"details": exc.details})
    return _render(exc)


async def integrity_error_handler(
    request: Request, exc: IntegrityError, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Handler for database integrity errors that escaped the repositories.
    """
    log = ensure_logger(logger, __name__)
    translated = translate_integrity_error(exc)
    log.warning(f"Integrity error translated to {translated.code}: {exc.orig}")
    return _render(translated)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handler for FastAPI's RequestValidationError.
    """
    errors = _create_validation_errors(exc.errors(), exclude_body=True)

    response = create_error_response(
        message="Request validation error",
        code="VALIDATION_ERROR",
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder(response, by_alias=True),
    )


async def pydantic_validation_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """
    Handler for Pydantic's ValidationError.
    """
    errors = _create_validation_errors(exc.errors(), exclude_body=False)

    response = create_error_response(
        message="Data validation error",
        code="VALIDATION_ERROR",
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder(response, by_alias=True),
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Generic exception handler for unhandled exceptions.
    """
    log = ensure_logger(logger, __name__)
    log.error(f"Unhandled exception: {str(exc)}")
    log.error(traceback.format_exc())

    response = create_error_response(
        message="Internal server error",
        code="INTERNAL_ERROR",
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=jsonable_encoder(response, by_alias=True),
    )


def register_exception_handlers(app: FastAPI, logger: Optional[Logger] = None) -> None:
    """
    Register all exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Optional logger for logging exceptions
    """
    # Covers every AppError subclass
    app.add_exception_handler(AppError, partial(app_error_handler, logger=logger))
    app.add_exception_handler(
        IntegrityError, partial(integrity_error_handler, logger=logger)
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, pydantic_validation_handler)

    app.add_exception_handler(
        Exception, partial(unhandled_exception_handler, logger=logger)
    )
