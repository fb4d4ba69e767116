"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
Email uniqueness is enforced by a unique index on the table; a violated
insert or update surfaces as EmailAlreadyRegisteredError.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from supabase import Client

from shared.repository import BaseRepository
from .exceptions import EmailAlreadyRegisteredError
from .models import UserRecord, normalize_email


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    All methods return UserRecord models mapped from database rows.
    Every write touches a single row.
    """

    def __init__(self, db: Client, table: str = "users") -> None:
        super().__init__(db)
        self._table = table

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Create a new user record.

        Args:
            data: Dictionary with name, email, password_hash and optional bio.

        Returns:
            Created UserRecord with generated ID and timestamps.
        """
        now = datetime.now(timezone.utc).isoformat()
        row = {**data, "email": normalize_email(data["email"]), "created_at": now, "updated_at": now}

        with self._guard(conflict=EmailAlreadyRegisteredError(row["email"])):
            result = self._db.table(self._table).insert(row).execute()

        return UserRecord(**result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self._guard():
            result = self._db.table(self._table).select("*").eq("id", user_id).execute()

        if not result.data:
            return None
        return UserRecord(**result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        with self._guard():
            result = (
                self._db.table(self._table)
                .select("*")
                .eq("email", normalize_email(email))
                .execute()
            )

        if not result.data:
            return None
        return UserRecord(**result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        """
        Update the supplied fields of a user and refresh updated_at.

        Returns:
            Updated UserRecord, or None if no row matched.
        """
        changes = dict(data)
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
        changes["updated_at"] = datetime.now(timezone.utc).isoformat()

        conflict = EmailAlreadyRegisteredError(changes["email"]) if "email" in changes else None
        with self._guard(conflict=conflict):
            result = self._db.table(self._table).update(changes).eq("id", user_id).execute()

        if not result.data:
            return None
        return UserRecord(**result.data[0])

    def delete(self, user_id: str) -> bool:
        with self._guard():
            result = self._db.table(self._table).delete().eq("id", user_id).execute()
        return bool(result.data)
