"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of driver failures into
application errors.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ConflictError, UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres error code for unique_violation
UNIQUE_VIOLATION = "23505"


class DatabaseError(UpstreamError):
    """Raised when the database cannot be reached or rejects a query."""

    def __init__(self, message: str = "Database unavailable"):
        super().__init__(message, service="database", code="DATABASE_ERROR")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _guard() to turn driver exceptions into application errors

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[UserRecord]):
            def get_by_id(self, user_id: str) -> Optional[UserRecord]:
                with self._guard():
                    result = self._db.table("users").select("*").eq("id", user_id).execute()
                if not result.data:
                    return None
                return UserRecord(**result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @contextmanager
    def _guard(self, conflict: ConflictError | None = None) -> Iterator[None]:
        """
        Translate driver failures raised inside the block.

        Args:
            conflict: Error to raise on a unique-constraint violation.
                      Without one, violations are treated as database errors.
        """
        try:
            yield
        except APIError as e:
            if conflict is not None and e.code == UNIQUE_VIOLATION:
                raise conflict from e
            logger.error("Database query failed: code=%s message=%s", e.code, e.message)
            raise DatabaseError() from e
        except httpx.HTTPError as e:
            logger.error("Database request failed: %s", e)
            raise DatabaseError() from e
