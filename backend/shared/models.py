"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents the caller of a protected route.

    Built by the auth middleware from a verified token and passed to
    route handlers as an explicit argument. The token subject is the
    only identity claim; everything else is looked up when needed.
    """

    id: str = Field(..., description="User ID (token subject)")
    issued_at: Optional[datetime] = Field(None, description="When the token was issued")
    expires_at: Optional[datetime] = Field(None, description="When the token expires")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
