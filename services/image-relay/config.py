"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel
from relay_common import RedisConfig


class UploadConfig(BaseModel, frozen=True):
    """Inbound upload limits and credential storage keys."""

    max_file_size: int = 10 * 1024 * 1024
    allowed_types: frozenset[str] = frozenset(
        {"image/jpeg", "image/png", "image/gif", "image/webp"}
    )
    password_key: str = "om_qq_password"
    cookie_key: str = "om_qq_cookies"


class ImageHostConfig(BaseModel, frozen=True):
    """Upstream image host endpoint and the form fields it expects."""

    upload_url: str = "https://om.qq.com/image/orginalupload"
    referer: str = "https://om.qq.com/userReg/mediaInfo"
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    file_field: str = "Filedata"
    sub_module: str = "userAuth_individual_head"
    client_id: str = "WU_FILE_0"
    app_key: str = "1"
    ret_img_attr: str = "1"
    source: str = "user"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    port: int = 8000
    redis: RedisConfig
    upload: UploadConfig = UploadConfig()
    image_host: ImageHostConfig = ImageHostConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        port=int(os.getenv("PORT", "8000")),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "redis"),
            port=int(os.getenv("REDIS_PORT", "6379")),
            db=int(os.getenv("REDIS_DB", "0")),
        ),
        image_host=ImageHostConfig(
            upload_url=os.getenv(
                "OM_UPLOAD_URL", "https://om.qq.com/image/orginalupload"
            ),
        ),
    )
