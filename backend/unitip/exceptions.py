"""
Unitip Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a message and optional context dict. Global
       exception handlers (registered in main.py) catch these and return the
       JSON error envelope built by `APIResponse`.
Who:   Raised by routes, the session verifier and services.

Exception Hierarchy:
    UnitipError (base)
    ├── ValidationError     → 400 Bad Request (per-field errors)
    ├── UnauthorizedError   → 401 Unauthorized (missing/invalid bearer token)
    ├── ForbiddenError      → 403 Forbidden (role not permitted)
    └── DatabaseError       → 500 Internal Server Error

    Queries that expect exactly one row and find none are reported as
    DatabaseError (500), not as a 404.
"""

from typing import Any, Dict, List, Optional


class UnitipError(Exception):
    """
    Base exception for all Unitip application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(UnitipError):
    """
    Raised when client input fails validation.

    Carries the ordered list of `{"path": ..., "message": ...}` entries, one
    per violated field, exactly as they are returned in the 400 body.

    Example response:
        {
            "errors": [
                {"path": "title", "message": "Judul tidak boleh kosong!"},
                {"path": "price", "message": "Biaya tidak boleh negatif!"}
            ]
        }
    """

    def __init__(
        self,
        errors: List[Dict[str, str]],
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message="Validation failed", context=context)
        self.errors = errors

    @classmethod
    def for_field(cls, path: str, message: str) -> "ValidationError":
        """Single-field shortcut, e.g. an invalid query parameter."""
        return cls(errors=[{"path": path, "message": message}])


class UnauthorizedError(UnitipError):
    """Raised when the bearer token is missing or matches no active session."""

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(UnitipError):
    """
    Raised when an authenticated user's role does not permit the action.

    What:    e.g. a "customer" trying to create an offer.
    HTTP:    403 Forbidden; the message is returned to the client.
    """

    def __init__(
        self,
        message: str = "Forbidden",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(UnitipError):
    """
    Raised when database operations fail unexpectedly.

    What:    A query, insert, or update failed, or a row that must exist
             was not found.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Details go
        into `context` and are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
