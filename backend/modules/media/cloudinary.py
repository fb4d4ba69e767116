"""
Cloudinary implementation of the media uploader.

Talks to the Cloudinary REST upload API directly with httpx. Requests are
signed with the account's API secret; no retries are attempted and every
failure surfaces as MediaUploadError.
"""

import hashlib
import logging
import time
from typing import Any, Optional

import httpx

from .exceptions import MediaUploadError
from .interfaces import IMediaUploader
from .models import UploadedMedia

logger = logging.getLogger(__name__)

CLOUDINARY_API_URL = "https://api.cloudinary.com/v1_1"

EXTENSION_BY_MIME = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}


def sign_params(params: dict[str, Any], api_secret: str) -> str:
    """
    Compute a Cloudinary request signature.

    Parameters are sorted by name, joined as key=value pairs with '&',
    suffixed with the API secret and hashed with SHA-1.
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryUploader(IMediaUploader):
    """Uploads and deletes images on Cloudinary."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "profile_pics",
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            cloud_name: Cloudinary account name
            api_key: Cloudinary API key
            api_secret: Cloudinary API secret, used only for signing
            folder: Folder that asset IDs are placed under
            timeout: Seconds to wait for the host before giving up
            transport: Optional httpx transport (tests use MockTransport)
        """
        self._cloud_name = cloud_name
        self._api_key = api_key
        self._api_secret = api_secret
        self._folder = folder
        self._timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._cloud_name and self._api_key and self._api_secret)

    def _url(self, action: str) -> str:
        return f"{CLOUDINARY_API_URL}/{self._cloud_name}/image/{action}"

    def _signed(self, params: dict[str, Any]) -> dict[str, Any]:
        params = {**params, "timestamp": int(time.time())}
        return {
            **params,
            "api_key": self._api_key,
            "signature": sign_params(params, self._api_secret),
        }

    async def _post(self, action: str, data: dict[str, Any], files: Optional[dict] = None) -> dict:
        if not self.is_configured:
            raise MediaUploadError(reason="Cloudinary credentials not configured")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._url(action), data=data, files=files)
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            logger.warning("Cloudinary %s timed out after %ss", action, self._timeout)
            raise MediaUploadError(reason="timeout") from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Cloudinary %s returned %s: %s",
                action, e.response.status_code, e.response.text[:200],
            )
            raise MediaUploadError(reason=f"status {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Cloudinary %s failed: %s", action, e)
            raise MediaUploadError(reason=str(e)) from e

    async def upload(self, data: bytes, mime_type: str, public_id: str) -> UploadedMedia:
        """Upload an image, overwriting whatever is stored at the same ID."""
        params = self._signed({
            "folder": self._folder,
            "public_id": public_id,
            "overwrite": "true",
            "invalidate": "true",
        })
        filename = f"{public_id}.{EXTENSION_BY_MIME.get(mime_type, 'img')}"
        body = await self._post("upload", params, files={"file": (filename, data, mime_type)})

        url = body.get("secure_url")
        if not url:
            raise MediaUploadError(reason="response missing secure_url")

        return UploadedMedia(url=url, public_id=body.get("public_id", f"{self._folder}/{public_id}"))

    async def delete(self, public_id: str) -> None:
        """Destroy an image and invalidate cached copies on the CDN."""
        body = await self._post("destroy", self._signed({
            "public_id": public_id,
            "invalidate": "true",
        }))
        # "not found" is fine: the image is gone either way
        if body.get("result") not in ("ok", "not found"):
            raise MediaUploadError(reason=f"destroy result {body.get('result')!r}")
