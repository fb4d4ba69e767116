"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from one Settings
object built at startup.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenIssuer
    from modules.media.interfaces import IMediaUploader
    from modules.profiles.interfaces import IProfileService
    from modules.users.interfaces import IUserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access and
    cached as singletons within the container.

    The user repository and media uploader can be injected, which is
    how tests run the real services against in-memory fakes.
    """

    def __init__(
        self,
        settings: Settings,
        user_repository: "Optional[IUserRepository]" = None,
        media_uploader: "Optional[IMediaUploader]" = None,
    ) -> None:
        self.settings = settings
        self._user_repository = user_repository
        self._media_uploader = media_uploader
        self._password_hasher: "PasswordHasher | None" = None
        self._token_issuer: "TokenIssuer | None" = None
        self._auth_service: "IAuthService | None" = None
        self._profile_service: "IProfileService | None" = None

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(
                get_supabase_client(self.settings),
                table=self.settings.users_table,
            )
        return self._user_repository

    @property
    def media_uploader(self) -> "IMediaUploader":
        """Get the media uploader instance."""
        if self._media_uploader is None:
            from modules.media.cloudinary import CloudinaryUploader
            self._media_uploader = CloudinaryUploader(
                cloud_name=self.settings.cloudinary_cloud_name,
                api_key=self.settings.cloudinary_api_key,
                api_secret=self.settings.cloudinary_api_secret,
                folder=self.settings.cloudinary_folder,
                timeout=self.settings.upload_timeout_seconds,
            )
        return self._media_uploader

    @property
    def password_hasher(self) -> "PasswordHasher":
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def token_issuer(self) -> "TokenIssuer":
        if self._token_issuer is None:
            from modules.auth.tokens import TokenIssuer
            self._token_issuer = TokenIssuer(
                secret=self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
                expire_minutes=self.settings.jwt_expire_minutes,
            )
        return self._token_issuer

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                tokens=self.token_issuer,
            )
        return self._auth_service

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                users=self.user_repository,
                media=self.media_uploader,
                max_picture_bytes=self.settings.max_picture_bytes,
                allowed_picture_types=self.settings.allowed_picture_types,
            )
        return self._profile_service


def get_container(request: Request) -> ServiceContainer:
    """
    Get the container of the application serving this request.

    create_app() builds it from the settings it was given and keeps it
    on app.state, so every component sees those settings.
    """
    return request.app.state.container


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_profile_service(container: ServiceContainer = Depends(get_container)) -> "IProfileService":
    """FastAPI dependency for profile service."""
    return container.profiles


def get_token_issuer(container: ServiceContainer = Depends(get_container)) -> "TokenIssuer":
    """FastAPI dependency for the token issuer used by the auth middleware."""
    return container.token_issuer
