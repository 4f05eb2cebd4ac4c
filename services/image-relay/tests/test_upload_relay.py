from unittest.mock import MagicMock

import pytest

from domain import ImageUpload, UploadRelay
from exceptions import PayloadTooLargeError, UnsupportedMediaTypeError
from interfaces import ImageHostClient

LIMIT = 10 * 1024 * 1024


@pytest.fixture
def host():
    return MagicMock(spec=ImageHostClient)


@pytest.fixture
def relay(host, upload_config):
    return UploadRelay(host, upload_config)


def _upload(size: int, content_type: str | None = "image/png") -> ImageUpload:
    return ImageUpload(filename="a.png", content_type=content_type, size=size, data=b"x")


@pytest.mark.parametrize("content_type", ["image/png", "text/plain", None])
def test_oversized_file_rejected_for_size_first(relay, content_type):
    with pytest.raises(PayloadTooLargeError, match="max 10MB"):
        relay.validate(_upload(LIMIT + 1, content_type))


@pytest.mark.parametrize("content_type", ["text/plain", "image/svg+xml", "image/bmp", None])
def test_disallowed_type_rejected(relay, content_type):
    with pytest.raises(UnsupportedMediaTypeError, match="Unsupported file type"):
        relay.validate(_upload(LIMIT, content_type))


@pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/gif", "image/webp"])
def test_allowed_types_pass_at_limit(relay, content_type):
    relay.validate(_upload(LIMIT, content_type))


def test_relay_forwards_to_image_host(relay, host):
    host.upload.return_value = {"url": "http://x"}
    upload = ImageUpload(filename="cat.gif", content_type="image/gif", size=3, data=b"GIF")

    assert relay.relay(upload, "uin=1") == {"url": "http://x"}
    host.upload.assert_called_once_with(
        data=b"GIF", content_type="image/gif", filename="cat.gif", session_cookie="uin=1"
    )
