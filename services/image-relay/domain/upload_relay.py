"""Core business logic for relaying uploads to the image host."""

from typing import Any

from relay_common import setup_logging

from config import UploadConfig
from domain.models import ImageUpload
from exceptions import PayloadTooLargeError, UnsupportedMediaTypeError
from interfaces import ImageHostClient

logger = setup_logging()


class UploadRelay:
    """Validates browser uploads and forwards them to the image host."""

    def __init__(self, image_host: ImageHostClient, config: UploadConfig):
        self._image_host = image_host
        self._config = config

    def validate(self, upload: ImageUpload) -> None:
        """
        Checks the size limit first, then the MIME allow-list.

        Raises:
            PayloadTooLargeError: If the file exceeds the configured size.
            UnsupportedMediaTypeError: If the MIME type is not allowed.
        """
        if upload.size > self._config.max_file_size:
            raise PayloadTooLargeError(upload.size, self._config.max_file_size)

        if upload.content_type not in self._config.allowed_types:
            raise UnsupportedMediaTypeError(upload.content_type)

    def relay(self, upload: ImageUpload, session_cookie: str) -> Any:
        """
        Forwards a validated upload in a single attempt.

        Returns:
            The image host's data payload.

        Raises:
            UpstreamError: If the host is unreachable or fails.
            UpstreamRejectedError: If the host rejects the upload.
        """
        logger.info(
            "Relaying upload",
            extra={
                "file_name": upload.filename,
                "content_type": upload.content_type,
                "size": upload.size,
            },
        )
        return self._image_host.upload(
            data=upload.data,
            content_type=upload.content_type,
            filename=upload.filename,
            session_cookie=session_cookie,
        )
