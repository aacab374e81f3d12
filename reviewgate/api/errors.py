"""Translate failures into the `{error: ...}` JSON envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from reviewgate.core.exceptions import (
    AuthenticationError,
    PersistenceError,
    ReviewGateException,
    UpstreamError,
    ValidationError,
)
from reviewgate.schemas.common import ErrorEnvelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal error"
_HTTP_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def map_domain_error(exc: Exception) -> tuple[int, str]:
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST, str(exc)
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED, str(exc)
    if isinstance(exc, (UpstreamError, PersistenceError)):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or INTERNAL_ERROR_MESSAGE


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    envelope = ErrorEnvelope(error=message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(), headers=headers)


async def handle_domain_error(request: Request, exc: ReviewGateException) -> JSONResponse:
    code, message = map_domain_error(exc)
    level = logging.ERROR if code >= 500 else logging.WARNING
    logger.log(
        level,
        "api.request.failed",
        extra={
            "event": "api.request.failed",
            "path": request.url.path,
            "method": request.method,
            "status_code": code,
            "error_type": exc.__class__.__name__,
            "error": str(exc),
        },
        exc_info=exc if code >= 500 else None,
    )
    return error_response(code, message)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "api.request.invalid",
        extra={"event": "api.request.invalid", "path": request.url.path, "errors": exc.errors()},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = _HTTP_MESSAGES.get(exc.status_code) or str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "api.request.unhandled",
        extra={
            "event": "api.request.unhandled",
            "path": request.url.path,
            "method": request.method,
            "error_type": exc.__class__.__name__,
        },
        exc_info=exc,
    )
    _, message = map_domain_error(exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReviewGateException, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
