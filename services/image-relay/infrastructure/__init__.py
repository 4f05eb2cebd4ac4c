"""Concrete implementations of infrastructure interfaces."""

from .om_image_host import OmImageHostClient, generate_client_ip
from .redis_store import RedisKeyValueStore

__all__ = ["OmImageHostClient", "RedisKeyValueStore", "generate_client_ip"]
