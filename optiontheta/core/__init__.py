"""Core utilities shared across the backend."""

from .errors import OptionThetaError, ResourceNotFoundError, StorageError, ValidationError
from .logging import bind_request_context, clear_request_context, configure_logging

__all__ = [
    "OptionThetaError",
    "ResourceNotFoundError",
    "StorageError",
    "ValidationError",
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
]
