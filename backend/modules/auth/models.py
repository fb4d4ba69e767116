"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, EmailStr, Field, field_validator

from modules.users.models import NAME_MAX_LENGTH, UserPublic, normalize_email

from .passwords import MAX_PASSWORD_BYTES, password_too_long

PASSWORD_MIN_LENGTH = 8


class TokenClaims(BaseModel):
    """Decoded bearer token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    @property
    def issued_at(self) -> datetime:
        return datetime.fromtimestamp(self.iat, tz=timezone.utc)

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


class SignupRequest(BaseModel):
    """Body of POST /api/auth/signup."""

    name: str = Field(..., max_length=NAME_MAX_LENGTH, description="Display name")
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        description="Plaintext password, hashed before storage",
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """Body of POST /api/auth/login."""

    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Plaintext password")


class AuthResult(BaseModel):
    """Token and user returned by signup and login."""

    token: str
    user: UserPublic


class AuthResponse(BaseModel):
    """Response envelope for signup and login."""

    success: bool = True
    token: str
    user: UserPublic


class LogoutResponse(BaseModel):
    """Response envelope for logout."""

    success: bool = True
    message: str = "Logged out"
