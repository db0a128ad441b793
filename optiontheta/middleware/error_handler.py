"""Application-wide exception handling."""

from __future__ import annotations

import uuid

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..core.errors import OptionThetaError, StorageError, ValidationError
from ..core.logging import bind_request_context, clear_request_context

CORRELATION_HEADER = "X-Correlation-ID"

logger = structlog.get_logger("optiontheta.error")


def _error_response(exc: OptionThetaError, request: Request) -> JSONResponse:
    """Log an application error and render it as ``{"error": message}``."""
    log_method = logger.warning if exc.status_code < 500 else logger.error
    log_method(
        "Handled application error",
        error=exc.message,
        code=exc.code,
        status=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_option_theta_error(request: Request, exc: OptionThetaError) -> JSONResponse:
    return _error_response(exc, request)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return _error_response(ValidationError(details=errors), request)


async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage failures that escaped the service layer (e.g. on reads)."""
    logger.error("Database error", error_type=type(exc).__name__, path=request.url.path)
    return _error_response(StorageError(), request)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Normalize framework HTTP errors (unknown routes, bad methods)."""
    log_method = logger.warning if exc.status_code < 500 else logger.error
    log_method(
        "HTTPException encountered",
        detail=exc.detail,
        status=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map every known error type to a status code and ``{"error": ...}`` body."""
    app.add_exception_handler(OptionThetaError, handle_option_theta_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id per request and turns unhandled errors into 500s."""

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        bind_request_context(correlation_id)

        try:
            response = await call_next(request)
        except Exception as exc:
            self.logger.exception(
                "Unhandled application error",
                error_type=type(exc).__name__,
                method=request.method,
                path=request.url.path,
            )
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Server error"},
            )
        finally:
            clear_request_context()

        response.headers[CORRELATION_HEADER] = correlation_id
        return response


__all__ = ["ErrorHandlingMiddleware", "register_exception_handlers"]
