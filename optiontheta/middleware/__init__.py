"""Middleware components for the FastAPI application."""

from .error_handler import ErrorHandlingMiddleware, register_exception_handlers

__all__ = ["ErrorHandlingMiddleware", "register_exception_handlers"]
