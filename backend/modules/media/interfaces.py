"""
Media module interface.

The profile service depends on IMediaUploader, not on a specific host.
"""

from typing import Protocol, runtime_checkable

from .models import UploadedMedia


@runtime_checkable
class IMediaUploader(Protocol):
    """Interface for an external image host."""

    async def upload(self, data: bytes, mime_type: str, public_id: str) -> UploadedMedia:
        """
        Store an image under `public_id`, replacing any previous image there.

        Args:
            data: Raw image bytes
            mime_type: Content type of the image
            public_id: Stable asset ID, one per user

        Returns:
            UploadedMedia with the durable URL

        Raises:
            MediaUploadError: If the host fails or times out
        """
        ...

    async def delete(self, public_id: str) -> None:
        """
        Remove an image from the host.

        Raises:
            MediaUploadError: If the host fails or times out
        """
        ...
