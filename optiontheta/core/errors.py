"""Application errors and the HTTP status each one maps to."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import status


class OptionThetaError(Exception):
    """Base application error, rendered as ``{"error": message}``.

    Subclasses pick the status code, a machine-readable ``code`` used in logs,
    and the message used when none is given.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "server_error"
    message = "Server error"

    def __init__(self, message: Optional[str] = None, *, details: Any = None) -> None:
        if message is not None:
            self.message = message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(OptionThetaError):
    """A request body, path or query parameter failed validation."""

    status_code = 422
    code = "validation_error"
    message = "Request validation failed."


class ResourceNotFoundError(OptionThetaError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    message = "Resource not found"


class StorageError(OptionThetaError):
    """The database rejected or failed a statement; the cause stays in the logs."""

    code = "storage_error"


__all__ = [
    "OptionThetaError",
    "ResourceNotFoundError",
    "StorageError",
    "ValidationError",
]
