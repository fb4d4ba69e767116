"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def signup(self, name: str, email: str, password: str) -> AuthResult:
        """
        Register a new user and sign them in.

        Args:
            name: Display name, must not be blank
            email: Login email, must be a valid address
            password: Plaintext password, at least 8 characters

        Returns:
            AuthResult with a fresh token and the public user payload

        Raises:
            ValidationError: If any field is invalid
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Exchange credentials for a token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def logout(self, user: AuthenticatedUser) -> None:
        """
        Acknowledge a logout.

        Tokens are not tracked server-side, so the client discards its token
        and this call always succeeds for an authenticated caller.
        """
        ...
