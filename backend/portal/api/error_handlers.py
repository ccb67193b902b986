"""Error Handlers — exception handlers that render the {success: false} envelope.

Invariants:
    - PortalError → its own status and to_response() envelope
    - RequestValidationError → 400 with field-level details
    - HTTPException → {success: false, error: detail} with the exception's status
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Handlers registered from one place so main.py stays a wiring module
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.core.errors import PortalError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_RESPONSE = {
    "success": False,
    "error": "Internal server error",
    "code": "INTERNAL_ERROR",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_portal_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def portal_error_response(request: Request, exc: PortalError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.http_status,
            "service": exc.context.service,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_RESPONSE,
    )


def _register_portal_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        return portal_error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return internal_error_response(request, exc)


_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Envelope whose error text summarizes the first failing field."""
    details = [
        {
            "field": _field_name(e["loc"]),
            "message": e["msg"].removeprefix("Value error, "),
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "success": False,
        "error": _summary(details[0]) if details else "Invalid request data",
        "code": "VALIDATION_ERROR",
        "details": details,
    }


def _field_name(loc: tuple) -> str:
    if loc and loc[0] in _LOCATIONS:
        loc = loc[1:]
    return ".".join(str(part) for part in loc)


def _summary(detail: dict) -> str:
    field, message = detail["field"], detail["message"]
    if not field or message.startswith(field):
        return message
    return f"{field}: {message}"
