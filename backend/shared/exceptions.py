"""
Base exception classes for the PV Market backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps every base class to one HTTP status code, so raising the
right base is all a module has to do to get a consistent error response.
"""

from typing import Optional, Any


class PVMarketError(Exception):
    """
    Base exception for all PV Market errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(PVMarketError):
    """Resource not found."""

    status_code = 404


class ValidationError(PVMarketError):
    """Input validation failed."""

    status_code = 400


class ConflictError(PVMarketError):
    """Request conflicts with existing state (duplicate email, bad transition)."""

    status_code = 400


class AuthenticationError(PVMarketError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(PVMarketError):
    """Authorization failed (acting identity does not own the resource)."""

    status_code = 403


class ExternalServiceError(PVMarketError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
