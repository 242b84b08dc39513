"""
API Error Handlers

This module contains error handling functions and utilities for the members API.
Every error leaves the API in the same envelope:
``{"success": false, "error": <short label>, "message": <user-facing text>}``.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dpr_api.data.errors import ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


class APIError(Exception):
    """An error that maps directly onto an HTTP status and error envelope."""

    def __init__(self, status_code: int, error: str, message: str, extra: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        self.error = error
        self.message = message
        self.extra = extra or {}
        super().__init__(message)


def error_body(error: str, message: str, **extra: Any) -> Dict[str, Any]:
    """Build the standard error envelope."""
    body = {"success": False, "error": error, "message": message}
    body.update(extra)
    return body


def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError raised by a route."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error, exc.message, **exc.extra)
    )


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render framework HTTP errors; unknown routes get the not-found envelope.
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("Not found", "Endpoint tidak ditemukan", requested=request.url.path)
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )


def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Custom handler for request validation errors.

    Args:
        request: The request that caused the validation error
        exc: The validation error

    Returns:
        JSONResponse with the offending fields listed under ``details``
    """
    errors = []
    for error in exc.errors():
        error_location = " -> ".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": error_location,
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body("Validation error", "Parameter permintaan tidak valid", details=errors)
    )


def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler: log the failure and answer with a generic 500.
    """
    logger.error(
        "Unhandled exception processing %s %s: %s",
        request.method, request.url.path, exc,
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(INTERNAL_ERROR, "Terjadi kesalahan pada server")
    )


@contextmanager
def error_handler(operation_name: str, message: str):
    """
    Context manager for consistent error handling in API endpoints.

    Args:
        operation_name: Name of the operation for logging
        message: User-facing message returned when the operation fails

    Raises:
        APIError: 400 for invalid input, 500 for any other failure
    """
    try:
        yield
    except APIError:
        raise
    except ValidationError as e:
        logger.warning(f"Invalid input in {operation_name}: {e}")
        raise APIError(status.HTTP_400_BAD_REQUEST, "Bad request", str(e))
    except Exception as e:
        logger.error(f"Error in {operation_name}: {e}", exc_info=True)
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR, message)


# Export all error handlers
__all__ = [
    'APIError',
    'error_body',
    'api_error_handler',
    'http_exception_handler',
    'validation_exception_handler',
    'general_exception_handler',
    'error_handler',
]
