"""
Profiles module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class ProfileNotFoundError(NotFoundError):
    """Raised when the caller's account no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UnsupportedImageTypeError(ValidationError):
    """Raised when an uploaded picture is not an allowed image type."""

    def __init__(self, mime_type: str, allowed: list[str]):
        super().__init__(
            f"Unsupported image type. Allowed types: {', '.join(allowed)}",
            code="UNSUPPORTED_IMAGE_TYPE",
            details={"mime_type": mime_type, "allowed": allowed},
        )


class ImageTooLargeError(ValidationError):
    """Raised when an uploaded picture exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Image too large. Maximum size is {limit // (1024 * 1024)} MB",
            code="IMAGE_TOO_LARGE",
            details={"size": size, "limit": limit},
        )
