"""
Media module data models.
"""

from pydantic import BaseModel, Field


class UploadedMedia(BaseModel):
    """A stored image on the external host."""

    url: str = Field(..., description="Durable HTTPS URL of the image")
    public_id: str = Field(..., description="Host-side asset ID, used for deletion")
