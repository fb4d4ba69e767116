"""
Users module interface.

The auth and profile services depend on IUserRepository rather than on
Supabase directly, so tests can swap in an in-memory store.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """Credential store: one record per registered user."""

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is already stored
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        """
        Apply a partial update to a single user.

        Returns:
            The updated record, or None if the user does not exist

        Raises:
            EmailAlreadyRegisteredError: If the new email is already stored
        """
        ...

    def delete(self, user_id: str) -> bool:
        """Delete a user. Returns True if a record was removed."""
        ...
