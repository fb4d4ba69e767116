"""
Media module exceptions.
"""

from typing import Optional

from shared.exceptions import UpstreamError


class MediaUploadError(UpstreamError):
    """Raised when the image host fails, times out, or is not configured."""

    def __init__(
        self,
        message: str = "Image upload failed",
        reason: Optional[str] = None,
    ):
        super().__init__(
            message,
            service="cloudinary",
            code="MEDIA_UPLOAD_FAILED",
            details={"reason": reason} if reason else None,
        )
