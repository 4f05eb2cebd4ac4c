"""Domain models for the image-relay service."""

from enum import Enum

from pydantic import BaseModel


class ImageUpload(BaseModel, frozen=True):
    """An image received from the browser, held only for the current request."""

    filename: str
    content_type: str | None
    size: int
    data: bytes


class CredentialsOutcome(str, Enum):
    """Result of storing credentials."""

    CREATED = "created"
    UPDATED = "updated"
