"""
User module data models.

UserRecord is the stored document, including the password hash.
UserPublic is the only shape that ever leaves the service layer.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NAME_MAX_LENGTH = 100
BIO_MAX_LENGTH = 500


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively, so they are stored lower-cased."""
    return email.strip().lower()


class UserRecord(BaseModel):
    """A row of the users table."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: str
    password_hash: str = Field(..., repr=False)
    bio: Optional[str] = None
    profile_pic: Optional[str] = None
    profile_pic_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    def to_public(self) -> "UserPublic":
        return UserPublic(
            id=self.id,
            name=self.name,
            email=self.email,
            bio=self.bio,
            profile_pic=self.profile_pic,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UserPublic(BaseModel):
    """
    User payload returned to clients.

    Serialized with camelCase keys (profilePic, createdAt, ...) for the
    browser client. There is deliberately no password field here.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    bio: Optional[str] = Field(None, description="Free-text biography")
    profile_pic: Optional[str] = Field(None, description="Profile picture URL")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")
