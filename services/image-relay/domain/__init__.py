"""Domain layer containing business logic and models."""

from .credential_store import CredentialStore
from .models import CredentialsOutcome, ImageUpload
from .upload_relay import UploadRelay

__all__ = [
    "CredentialStore",
    "CredentialsOutcome",
    "ImageUpload",
    "UploadRelay",
]
