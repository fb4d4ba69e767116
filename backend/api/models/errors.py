"""
Error response models.

Every failed request gets the same envelope.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    message: str


class MessageResponse(BaseModel):
    """Success response carrying only a message."""

    success: bool = True
    message: str
