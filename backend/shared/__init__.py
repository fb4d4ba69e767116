"""
Shared infrastructure for Profile Hub backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with driver error translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ProfileHubError,
    ValidationError,
    UnauthorizedError,
    ConflictError,
    NotFoundError,
    UpstreamError,
)
from .models import AuthenticatedUser
from .repository import BaseRepository, DatabaseError

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "ProfileHubError",
    "ValidationError",
    "UnauthorizedError",
    "ConflictError",
    "NotFoundError",
    "UpstreamError",
    "AuthenticatedUser",
    "BaseRepository",
    "DatabaseError",
]
