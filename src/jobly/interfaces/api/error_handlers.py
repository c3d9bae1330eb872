"""
Error handlers translating exceptions into JSON error responses.

Every error body has the shape ``{"error": {"message": ..., "status": ...}}``;
validation failures add the ordered ``errors`` list.
"""

from typing import Any, Dict, List, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from jobly.domains.job.application.validation import format_error
from jobly.shared.application.exceptions import (
    ApplicationException,
    UnauthorizedException,
    ValidationException,
)

logger = structlog.get_logger(__name__)


def get_error_message(status_code: int) -> str:
    """Get user-friendly error message based on status code"""
    error_messages = {
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        409: "Conflict",
        415: "Unsupported Media Type",
        500: "Internal Server Error",
    }

    return error_messages.get(status_code, "Unknown Error")


def error_body(status_code: int, message: str, errors: Optional[List[str]] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"message": message, "status": status_code}
    if errors is not None:
        error["errors"] = errors
    return {"error": error}


async def application_exception_handler(request: Request, exc: ApplicationException) -> JSONResponse:
    """Handle exceptions raised by the application layers"""
    errors = exc.errors if isinstance(exc, ValidationException) else None
    message = exc.message if exc.status_code < 500 else get_error_message(exc.status_code)

    logger.warning(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
        error_type=type(exc).__name__,
        detail=exc.message,
    )

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedException) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message, errors),
        headers=headers,
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors raised by FastAPI itself"""
    errors = [format_error(error) for error in exc.errors()]

    logger.warning(
        "Request validation error",
        method=request.method,
        path=request.url.path,
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, "Request validation failed", errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions (unknown routes, wrong methods, ...)"""
    message = exc.detail if isinstance(exc.detail, str) else get_error_message(exc.status_code)

    logger.warning(
        "HTTP error",
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a generic 500 without leaking internal details"""
    logger.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            get_error_message(status.HTTP_500_INTERNAL_SERVER_ERROR),
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install all error handlers on the application."""
    app.add_exception_handler(ApplicationException, application_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
