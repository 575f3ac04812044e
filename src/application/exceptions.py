"""Application layer exceptions.

Each exception carries the HTTP status code the web interface answers with.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for expected application failures."""

    status_code = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CsvValidationError(ApplicationError):
    """Raised when an uploaded CSV cannot be accepted."""


class InvalidFileTypeError(ApplicationError):
    """Raised when an upload is not a CSV file."""


class FileTooLargeError(ApplicationError):
    """Raised when an upload exceeds the configured size limit."""

    status_code = 413
