"""Error hierarchy for the movies API.

Every error carries the HTTP status it maps to and a user-facing message.
Routes raise these; :mod:`error_handlers` turns them into ``{"error": ...}``
JSON envelopes.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(ApiError):
    """Malformed or incomplete input."""

    status_code = 400


class AuthError(ApiError):
    """Missing or invalid credential."""

    status_code = 401


class NotFoundError(ApiError):
    """No record matches the requested id."""

    status_code = 404


class InternalError(ApiError):
    """Storage or other unexpected failure."""

    status_code = 500
