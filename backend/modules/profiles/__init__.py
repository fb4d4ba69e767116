"""
Profiles module.

Lets an authenticated user read, update and delete their own account
and replace their profile picture.

Public API:
- IProfileService: Interface for profile operations
- UpdateProfileRequest: Partial update body
- ProfileNotFoundError, UnsupportedImageTypeError, ImageTooLargeError
"""

from .interfaces import IProfileService
from .models import UpdateProfileRequest, ProfileResponse
from .exceptions import (
    ProfileNotFoundError,
    UnsupportedImageTypeError,
    ImageTooLargeError,
)

__all__ = [
    "IProfileService",
    "UpdateProfileRequest",
    "ProfileResponse",
    "ProfileNotFoundError",
    "UnsupportedImageTypeError",
    "ImageTooLargeError",
]
