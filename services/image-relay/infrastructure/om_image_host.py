"""om.qq.com implementation of the ImageHostClient interface."""

import random
from email.utils import formatdate
from typing import Any

import httpx
from relay_common import setup_logging

from config import ImageHostConfig
from exceptions import UpstreamError, UpstreamRejectedError
from interfaces import ImageHostClient

logger = setup_logging()

_DEFAULT_REJECTION_MESSAGE = "Upload failed"


def generate_client_ip(rng: random.Random | None = None) -> str:
    """Returns a random public-looking IPv4 address for the client-IP headers."""
    rng = rng or random
    first = rng.randint(48, 140)
    rest = (rng.randint(0, 255) for _ in range(3))
    return ".".join(str(octet) for octet in (first, *rest))


class OmImageHostClient(ImageHostClient):
    """Uploads images through the om.qq.com original-image endpoint."""

    def __init__(self, client: httpx.Client, config: ImageHostConfig):
        self._client = client
        self._config = config

    def _headers(self, session_cookie: str) -> dict[str, str]:
        ip = generate_client_ip()
        return {
            "CLIENT-IP": ip,
            "X-FORWARDED-FOR": ip,
            "User-Agent": self._config.user_agent,
            "Referer": self._config.referer,
            "Cookie": session_cookie,
        }

    def _form_fields(self, content_type: str, filename: str) -> dict[str, str]:
        return {
            "subModule": self._config.sub_module,
            "id": self._config.client_id,
            "name": filename,
            "type": content_type,
            "lastModifiedDate": formatdate(usegmt=True),
            "appkey": self._config.app_key,
            "isRetImgAttr": self._config.ret_img_attr,
            "from": self._config.source,
        }

    def upload(
        self,
        data: bytes,
        content_type: str,
        filename: str,
        session_cookie: str,
    ) -> Any:
        try:
            response = self._client.post(
                self._config.upload_url,
                headers=self._headers(session_cookie),
                data=self._form_fields(content_type, filename),
                files={self._config.file_field: (filename, data, content_type)},
            )
        except httpx.HTTPError as e:
            logger.exception(
                "Image host request failed",
                extra={"url": self._config.upload_url, "file_name": filename},
            )
            raise UpstreamError(str(e), cause=e) from e

        if not response.is_success:
            logger.error(
                "Image host returned error status",
                extra={"status_code": response.status_code, "file_name": filename},
            )
            raise UpstreamError(response.text, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.exception(
                "Image host returned invalid JSON", extra={"file_name": filename}
            )
            raise UpstreamError(response.text, response.status_code, e) from e

        envelope = body.get("response") if isinstance(body, dict) else None
        envelope = envelope if isinstance(envelope, dict) else {}
        code = envelope.get("code")
        if code != 0:
            message = envelope.get("msg") or _DEFAULT_REJECTION_MESSAGE
            logger.warning(
                "Image host rejected upload",
                extra={"code": code, "upstream_message": message, "file_name": filename},
            )
            raise UpstreamRejectedError(message, code=code)

        logger.info(
            "Image uploaded to host",
            extra={"file_name": filename, "size": len(data)},
        )
        return body.get("data")
