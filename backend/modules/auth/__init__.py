"""
Authentication module.

Handles signup, login, password hashing and bearer token issuing/verification.

Public API:
- IAuthService: Interface for auth operations
- TokenIssuer, verify_token: Bearer token handling
- PasswordHasher: bcrypt hashing
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthResult, SignupRequest, LoginRequest, TokenClaims
from .passwords import PasswordHasher
from .tokens import TokenIssuer, verify_token
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthResult",
    "SignupRequest",
    "LoginRequest",
    "TokenClaims",
    # Helpers
    "PasswordHasher",
    "TokenIssuer",
    "verify_token",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
]
