"""Centralized exception handlers for the FastAPI application.

Application exceptions are mapped to HTTP responses with a single error
format. Details of storage and unexpected failures are logged, never
returned.

Error Response Format:
    {
        "error": "Human-readable error message"
    }

Usage:
    from event_planner.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from event_planner.core.exceptions import (
    ApplicationException,
    DatabaseException,
    NotFoundException,
    RouteNotFoundException,
    ValidationException,
)

logger = logging.getLogger("EXCEPTION_HANDLERS")

INTERNAL_ERROR_MESSAGE = "Internal server error"

EXCEPTION_TO_STATUS: dict[type, int] = {
    ValidationException: status.HTTP_400_BAD_REQUEST,
    NotFoundException: status.HTTP_404_NOT_FOUND,
    RouteNotFoundException: status.HTTP_404_NOT_FOUND,
    DatabaseException: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: ApplicationException) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in EXCEPTION_TO_STATUS:
            return EXCEPTION_TO_STATUS[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    if first.get("type") == "json_invalid":
        return "Malformed JSON body"
    if first.get("type") == "value_error" and "error" in first.get("ctx", {}):
        return str(first["ctx"]["error"])
    if field:
        return f"Invalid {field}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(ApplicationException)
    async def application_exception_handler(
        request: Request,
        exc: ApplicationException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)

        if status_code >= 500:
            # Driver errors are chained as __cause__ and only logged
            logger.error(
                "Application error on %s %s: %s (details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.details,
                exc_info=exc,
            )
        else:
            logger.warning(
                "Request rejected on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
            )

        return _create_error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.warning(
            "Malformed request on %s %s: %s",
            request.method,
            request.url.path,
            message,
        )
        return _create_error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        # A known path with the wrong method is still an unmatched route
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return await application_exception_handler(
                request, RouteNotFoundException(request.method, request.url.path)
            )
        return _create_error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR_MESSAGE,
        )
