"""
Authentication module exceptions.

These exceptions are raised by the auth module and translated into
401 responses by the API error handlers.
"""

from shared.exceptions import UnauthorizedError


class InvalidTokenError(UnauthorizedError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(UnauthorizedError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(UnauthorizedError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(UnauthorizedError):
    """
    Raised when login fails.

    The message is the same whether the email is unknown or the password
    is wrong, so the response does not reveal which accounts exist.
    """

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")
