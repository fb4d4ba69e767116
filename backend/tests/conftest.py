"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
token factories, an in-memory user repository, a fake image host and an
application wired to both.
"""

import uuid
from datetime import datetime, timezone, timedelta
from typing import Any, Optional

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.media.exceptions import MediaUploadError
from modules.media.models import UploadedMedia
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.models import UserRecord, normalize_email
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to use as the subject
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    iat = now - timedelta(hours=2) if expired else now

    payload = {
        "sub": user_id,
        "exp": int(exp.timestamp()),
        "iat": int(iat.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository with the same contract."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}

    def _email_owner(self, email: str) -> Optional[str]:
        for user_id, row in self.rows.items():
            if row["email"] == email:
                return user_id
        return None

    def create(self, data: dict[str, Any]) -> UserRecord:
        email = normalize_email(data["email"])
        if self._email_owner(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        now = datetime.now(timezone.utc)
        row = {
            "id": str(uuid.uuid4()),
            "bio": None,
            "profile_pic": None,
            "profile_pic_id": None,
            **data,
            "email": email,
            "created_at": now,
            "updated_at": now,
        }
        self.rows[row["id"]] = row
        return UserRecord(**row)

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        row = self.rows.get(user_id)
        return UserRecord(**row) if row else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        user_id = self._email_owner(normalize_email(email))
        return self.get_by_id(user_id) if user_id else None

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        row = self.rows.get(user_id)
        if row is None:
            return None

        changes = dict(data)
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
            owner = self._email_owner(changes["email"])
            if owner is not None and owner != user_id:
                raise EmailAlreadyRegisteredError(changes["email"])

        row.update(changes)
        row["updated_at"] = datetime.now(timezone.utc)
        return UserRecord(**row)

    def delete(self, user_id: str) -> bool:
        return self.rows.pop(user_id, None) is not None


class FakeMediaUploader:
    """Records calls instead of talking to an image host."""

    def __init__(self) -> None:
        self.uploads: list[tuple[bytes, str, str]] = []
        self.deleted: list[str] = []
        self.fail_upload = False
        self.fail_delete = False

    async def upload(self, data: bytes, mime_type: str, public_id: str) -> UploadedMedia:
        if self.fail_upload:
            raise MediaUploadError(reason="timeout")
        self.uploads.append((data, mime_type, public_id))
        version = len(self.uploads)
        return UploadedMedia(
            url=f"https://images.test/v{version}/profile_pics/{public_id}.png",
            public_id=f"profile_pics/{public_id}",
        )

    async def delete(self, public_id: str) -> None:
        if self.fail_delete:
            raise MediaUploadError(reason="status 500")
        self.deleted.append(public_id)


@pytest.fixture
def settings() -> Settings:
    """Settings with a known signing secret and a cheap bcrypt cost."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def media_uploader() -> FakeMediaUploader:
    return FakeMediaUploader()


@pytest.fixture
def container(settings, user_repository, media_uploader) -> ServiceContainer:
    return ServiceContainer(
        settings,
        user_repository=user_repository,
        media_uploader=media_uploader,
    )


@pytest.fixture
def app(settings, container):
    """Create a fresh app wired to the in-memory collaborators."""
    return create_app(settings, container=container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
