"""
Domain-specific exception hierarchy.

Controllers raise these; the HTTP layer (``insurance_management.main``)
translates each one into a status code and body.  All inherit from
AppError so callers can catch broadly or narrowly as needed.
"""

from __future__ import annotations


class AppError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        *,
        entity: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.entity = entity
        self.details = details or {}
        super().__init__(message)


class NotFoundError(AppError):
    """An identifier did not resolve to a stored entity."""


class FieldValidationError(AppError):
    """One or more fields violated a constraint.

    ``errors`` maps the public field name to every message raised for it.
    """

    def __init__(self, errors: dict[str, list[str]], **kwargs) -> None:
        self.errors = errors
        super().__init__("Validation failed", **kwargs)


class AuthenticationError(AppError):
    """Unknown account or wrong password. Both surface identically."""

    def __init__(self, message: str, *, error_code: int, **kwargs) -> None:
        self.error_code = error_code
        super().__init__(message, **kwargs)


class StorageError(AppError):
    """Object storage upload failed after all retry attempts."""

    def __init__(self, message: str, *, attempts: int = 0, **kwargs) -> None:
        self.attempts = attempts
        super().__init__(message, **kwargs)
