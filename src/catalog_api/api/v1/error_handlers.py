"""
FastAPI exception handlers rendering every failure as the response envelope.

Services already return envelopes for the errors they classify; these handlers
cover what escapes them: request-shape validation, auth dependencies, app
errors raised outside a service, and a last-resort 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.exceptions.base import (
    RepositoryError,
    DuplicateError,
    NotFoundError,
    UnauthorizedError,
    InvalidTokenError,
)
from catalog_api.schemas.service_response import ServiceResponse

logger = logging.getLogger(__name__)

_LOCATION_PARTS = {"body", "query", "path", "header", "cookie"}


def format_validation_errors(errors: list[dict]) -> str:
    """
    [{"loc": ("path", "id"), "msg": "Input should be greater than 0"}, ...]
    -> "Invalid input: id: Input should be greater than 0; ..."
    """
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ())]
        field_parts = [p for p in loc if p not in _LOCATION_PARTS] or loc
        field = ".".join(field_parts) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return f"Invalid input: {'; '.join(parts)}"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 for a malformed body, query string or path parameter."""
    message = format_validation_errors(exc.errors())
    logger.info("request.invalid_input", extra={"method": request.method, "path": request.url.path})
    return ServiceResponse.failure(message, 400).to_response()


async def auth_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """401 (no token) / 400 (invalid token) raised by the verify_token dependency."""
    logger.info("auth.rejected", extra={"path": request.url.path, "error_code": exc.error_code})
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def duplicate_error_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    logger.info("DuplicateError for %s %s: fields=%s", request.method, request.url.path, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("NotFoundError for %s %s", request.method, request.url.path)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """
    Fallback for other app-level errors: status from error_code (400 when unset).
    The message is the friendly one; DB internals never reach the client.
    """
    logger.warning("RepositoryError for %s %s: %s", request.method, request.url.path, str(exc))
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error for %s %s", request.method, request.url.path)
    return ServiceResponse.failure("An unexpected error occurred", 500).to_response()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(UnauthorizedError, auth_error_handler)
    app.add_exception_handler(InvalidTokenError, auth_error_handler)
    app.add_exception_handler(DuplicateError, duplicate_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
