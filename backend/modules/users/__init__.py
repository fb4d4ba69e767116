"""
Users module.

Owns the user record and the credential store behind it.

Public API:
- IUserRepository: Interface for user persistence
- UserRecord: Stored user, including the password hash
- UserPublic: User payload safe to return to clients
- EmailAlreadyRegisteredError
"""

from .interfaces import IUserRepository
from .models import UserRecord, UserPublic, normalize_email
from .exceptions import EmailAlreadyRegisteredError

__all__ = [
    "IUserRepository",
    "UserRecord",
    "UserPublic",
    "normalize_email",
    "EmailAlreadyRegisteredError",
]
