"""
Profiles module data models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from modules.users.models import BIO_MAX_LENGTH, NAME_MAX_LENGTH, UserPublic, normalize_email


class UpdateProfileRequest(BaseModel):
    """
    Partial profile update.

    Only fields present in the request are applied. Unknown fields are
    rejected. `bio` may be null to clear it; `name` and `email` may not.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, max_length=NAME_MAX_LENGTH)
    email: Optional[EmailStr] = None
    bio: Optional[str] = Field(None, max_length=BIO_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError("Name cannot be empty")
        return value.strip()

    @field_validator("email")
    @classmethod
    def email_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("Email cannot be empty")
        return normalize_email(value)

    def changes(self) -> dict:
        """Fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class ProfileResponse(BaseModel):
    """Response envelope carrying a user."""

    success: bool = True
    user: UserPublic
