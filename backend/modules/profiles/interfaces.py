"""
Profiles module interface.

The API layer depends on IProfileService for all profile operations.
"""

from typing import Any, Protocol, runtime_checkable

from modules.users.models import UserPublic


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile operations on the caller's own account.
    """

    # Largest picture upload_picture accepts, in bytes
    max_picture_bytes: int

    async def get_profile(self, user_id: str) -> UserPublic:
        """
        Get the current user.

        Raises:
            ProfileNotFoundError: If the account no longer exists
        """
        ...

    async def update_profile(self, user_id: str, fields: dict[str, Any]) -> UserPublic:
        """
        Apply a partial update of name, email and bio.

        Args:
            user_id: The caller's ID
            fields: Any subset of {"name", "email", "bio"}

        Returns:
            The updated user

        Raises:
            ValidationError: If a field is unknown or invalid, or nothing is supplied
            EmailAlreadyRegisteredError: If the new email belongs to another account
            ProfileNotFoundError: If the account no longer exists
        """
        ...

    async def upload_picture(self, user_id: str, data: bytes, mime_type: str) -> UserPublic:
        """
        Replace the profile picture.

        The image is checked before any network call; on upstream
        failure the stored user is left unchanged.

        Raises:
            ValidationError: If the image is empty, too large, or of a disallowed type
            ProfileNotFoundError: If the account no longer exists
            MediaUploadError: If the image host fails or times out
        """
        ...

    async def delete_account(self, user_id: str) -> None:
        """
        Delete the account.

        Raises:
            ProfileNotFoundError: If the account is already gone
        """
        ...
