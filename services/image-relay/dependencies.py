"""FastAPI dependency injection configuration."""

from typing import Annotated

import httpx
import redis
from fastapi import Depends
from relay_common.logging import setup_logging

from config import AppConfig, load_config
from domain import CredentialStore, UploadRelay
from infrastructure import OmImageHostClient, RedisKeyValueStore
from interfaces import ImageHostClient, KeyValueStore

logger = setup_logging()

_config = load_config()

_redis_client = redis.Redis(
    host=_config.redis.host,
    port=_config.redis.port,
    db=_config.redis.db,
    decode_responses=True,
)
_store = RedisKeyValueStore(_redis_client)
logger.info(
    "Redis client configured",
    extra={"host": _config.redis.host, "port": _config.redis.port},
)

_http_client = httpx.Client()
_image_host = OmImageHostClient(_http_client, _config.image_host)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_key_value_store() -> KeyValueStore:
    """Returns the configured key-value store."""
    return _store


def get_image_host() -> ImageHostClient:
    """Returns the configured image host client."""
    return _image_host


def get_credential_store(
    store: Annotated[KeyValueStore, Depends(get_key_value_store)],
    config: Annotated[AppConfig, Depends(get_config)],
) -> CredentialStore:
    """Creates a CredentialStore over the provided key-value store."""
    return CredentialStore(store, config.upload)


def get_upload_relay(
    image_host: Annotated[ImageHostClient, Depends(get_image_host)],
    config: Annotated[AppConfig, Depends(get_config)],
) -> UploadRelay:
    """Creates an UploadRelay over the provided image host client."""
    return UploadRelay(image_host, config.upload)
