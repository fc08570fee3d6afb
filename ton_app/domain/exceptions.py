"""
Error taxonomy for the TON API.

Every failure the application raises on purpose carries an ErrorKind that
is decided where the error is raised. The API layer maps kinds to HTTP
status codes in one place (api/v1/error_handlers.py).
"""

# Standard library imports
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Stable error kinds, part of the API contract."""
    VALIDATION = "VALIDATION"
    EMAIL_CONFLICT = "EMAIL_CONFLICT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_FOUND = "NOT_FOUND"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    UNEXPECTED = "UNEXPECTED"


class TonAppError(Exception):
    """Base exception for all application errors."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TonAppError):
    """Raised when input is malformed (bad cursor, immutable field change, ...)."""
    kind = ErrorKind.VALIDATION


class EmailConflictError(TonAppError):
    """Raised when signing up with an email that is already registered."""
    kind = ErrorKind.EMAIL_CONFLICT


class InvalidCredentialsError(TonAppError):
    """Raised on any login failure. Deliberately carries no cause."""
    kind = ErrorKind.INVALID_CREDENTIALS


class NotFoundError(TonAppError):
    """Raised when a repository operation targets an absent id."""
    kind = ErrorKind.NOT_FOUND


class InvalidTokenError(TonAppError):
    """Raised when a bearer token is missing, malformed or badly signed."""
    kind = ErrorKind.INVALID_TOKEN


class TokenExpiredError(TonAppError):
    """Raised when a bearer token is past its encoded expiry."""
    kind = ErrorKind.TOKEN_EXPIRED
