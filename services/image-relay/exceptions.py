"""Custom exceptions for the image-relay service."""


class FileValidationError(Exception):
    """Raised when an uploaded file is rejected before forwarding."""


class PayloadTooLargeError(FileValidationError):
    """Raised when an uploaded file exceeds the size limit."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"File size exceeds limit (max {max_size / 1024 / 1024:g}MB)"
        )


class UnsupportedMediaTypeError(FileValidationError):
    """Raised when an uploaded file has a MIME type outside the allow-list."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__("Unsupported file type")


class InvalidPasswordError(Exception):
    """Raised when the presented admin password does not match the stored one."""

    def __init__(self):
        super().__init__("Wrong password")


class CookieNotConfiguredError(Exception):
    """Raised when an upload is attempted before any session cookie was set."""

    def __init__(self):
        super().__init__("Cookie not set")


class UpstreamError(Exception):
    """Raised when the image host cannot be reached or answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class UpstreamRejectedError(Exception):
    """Raised when the image host answers but reports a non-zero status code."""

    def __init__(self, message: str, code: int | None = None):
        self.code = code
        super().__init__(message)
