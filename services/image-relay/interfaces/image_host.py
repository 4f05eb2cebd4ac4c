"""Abstract interface for upstream image hosting."""

from abc import ABC, abstractmethod
from typing import Any


class ImageHostClient(ABC):
    """Abstract base class for image hosting backends."""

    @abstractmethod
    def upload(
        self,
        data: bytes,
        content_type: str,
        filename: str,
        session_cookie: str,
    ) -> Any:
        """
        Uploads an image on behalf of the account owning the session cookie.

        Args:
            data: Raw image bytes.
            content_type: MIME type of the image.
            filename: Original file name.
            session_cookie: Cookie header authorizing the upload.

        Returns:
            The host's data payload describing the stored image.

        Raises:
            UpstreamError: If the host is unreachable or answers with an error status.
            UpstreamRejectedError: If the host rejects the upload.
        """
        pass
