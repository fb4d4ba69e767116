"""
Base exception classes for the Profile Hub backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status in one place (api/errors.py).
"""

from typing import Optional, Any

import pydantic


class ProfileHubError(Exception):
    """
    Base exception for all Profile Hub errors.

    All custom exceptions should inherit from this class.
    """

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
        """Convert exception to a dictionary for logging and internal APIs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ProfileHubError):
    """Input validation failed."""

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        """
        Collapse a pydantic error into a ValidationError.

        The message names the first failing field; every failure is kept
        in details["fields"].
        """
        errors = exc.errors()
        fields = {
            ".".join(str(part) for part in err["loc"]) or "body": err["msg"]
            for err in errors
        }
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"])
        message = f"{field}: {first['msg']}" if field else first["msg"]
        return cls(message, details={"fields": fields})


class UnauthorizedError(ProfileHubError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ConflictError(ProfileHubError):
    """Resource already exists."""

    pass


class NotFoundError(ProfileHubError):
    """Resource not found."""

    pass


class UpstreamError(ProfileHubError):
    """Error communicating with an external service."""

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
