"""
Profile service implementation.

Reads and mutates the caller's own user record and proxies profile
pictures to the media uploader.
"""

import logging
from typing import Any, Optional

import pydantic

from shared.exceptions import ValidationError
from modules.media.exceptions import MediaUploadError
from modules.media.interfaces import IMediaUploader
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.interfaces import IUserRepository
from modules.users.models import UserPublic, UserRecord

from .exceptions import ImageTooLargeError, ProfileNotFoundError, UnsupportedImageTypeError
from .interfaces import IProfileService
from .models import UpdateProfileRequest

logger = logging.getLogger(__name__)

DEFAULT_MAX_PICTURE_BYTES = 5 * 1024 * 1024
DEFAULT_PICTURE_TYPES = ["image/jpeg", "image/png", "image/webp"]


class ProfileService(IProfileService):
    """
    Profile service backed by the user repository and an image host.
    """

    def __init__(
        self,
        users: IUserRepository,
        media: IMediaUploader,
        max_picture_bytes: int = DEFAULT_MAX_PICTURE_BYTES,
        allowed_picture_types: Optional[list[str]] = None,
    ):
        self._users = users
        self._media = media
        self.max_picture_bytes = max_picture_bytes
        self._allowed_picture_types = allowed_picture_types or DEFAULT_PICTURE_TYPES

    def _require_user(self, user_id: str) -> UserRecord:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise ProfileNotFoundError(user_id)
        return user

    async def get_profile(self, user_id: str) -> UserPublic:
        return self._require_user(user_id).to_public()

    async def update_profile(self, user_id: str, fields: dict[str, Any]) -> UserPublic:
        """Validate the supplied fields and write only those."""
        try:
            changes = UpdateProfileRequest.model_validate(fields).changes()
        except pydantic.ValidationError as e:
            raise ValidationError.from_pydantic(e)

        if not changes:
            raise ValidationError("No profile fields supplied")

        current = self._require_user(user_id)

        if "email" in changes and changes["email"] != current.email:
            owner = self._users.get_by_email(changes["email"])
            if owner is not None and owner.id != user_id:
                raise EmailAlreadyRegisteredError(changes["email"])

        updated = self._users.update(user_id, changes)
        if updated is None:
            raise ProfileNotFoundError(user_id)

        logger.info("Updated profile %s fields=%s", user_id, sorted(changes))
        return updated.to_public()

    def _check_picture(self, data: bytes, mime_type: str) -> None:
        if mime_type not in self._allowed_picture_types:
            raise UnsupportedImageTypeError(mime_type, self._allowed_picture_types)
        if not data:
            raise ValidationError("Image file is empty")
        if len(data) > self.max_picture_bytes:
            raise ImageTooLargeError(len(data), self.max_picture_bytes)

    async def upload_picture(self, user_id: str, data: bytes, mime_type: str) -> UserPublic:
        """Upload to the image host, then record the returned URL."""
        self._check_picture(data, mime_type)
        self._require_user(user_id)

        # One asset per user: re-uploads overwrite the previous picture
        media = await self._media.upload(data, mime_type, public_id=user_id)

        updated = self._users.update(user_id, {
            "profile_pic": media.url,
            "profile_pic_id": media.public_id,
        })
        if updated is None:
            raise ProfileNotFoundError(user_id)

        logger.info("Updated profile picture for %s", user_id)
        return updated.to_public()

    async def delete_account(self, user_id: str) -> None:
        """Delete the record, then try to remove the hosted picture."""
        user = self._require_user(user_id)

        if not self._users.delete(user_id):
            raise ProfileNotFoundError(user_id)
        logger.info("Deleted account %s", user_id)

        if user.profile_pic_id:
            try:
                await self._media.delete(user.profile_pic_id)
            except MediaUploadError:
                logger.warning(
                    "Could not delete picture %s for deleted account %s",
                    user.profile_pic_id, user_id,
                )
