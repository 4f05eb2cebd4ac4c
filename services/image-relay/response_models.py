"""Response models for the image-relay API."""

from typing import Any

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Response returned after a successful upload, carrying the host's data payload."""

    url: Any


class MessageResponse(BaseModel):
    """Response returned after credentials are stored."""

    message: str
