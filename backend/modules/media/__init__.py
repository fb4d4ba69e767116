"""
Media module.

Forwards profile pictures to an external image host.

Public API:
- IMediaUploader: Interface for image hosting
- UploadedMedia: Result of an upload
- MediaUploadError
"""

from .interfaces import IMediaUploader
from .models import UploadedMedia
from .exceptions import MediaUploadError

__all__ = [
    "IMediaUploader",
    "UploadedMedia",
    "MediaUploadError",
]
