"""Redis implementation of the KeyValueStore interface."""

import redis
from relay_common import KeyValueStoreError, setup_logging

from interfaces import KeyValueStore

logger = setup_logging()


class RedisKeyValueStore(KeyValueStore):
    """Persists string values in Redis without expiry."""

    def __init__(self, client: redis.Redis):
        self._client = client

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(key)
        except redis.RedisError as e:
            logger.exception("Redis get failed", extra={"key": key})
            raise KeyValueStoreError(key, "get", cause=e) from e

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
            logger.info("Redis key written", extra={"key": key})
        except redis.RedisError as e:
            logger.exception("Redis set failed", extra={"key": key})
            raise KeyValueStoreError(key, "set", cause=e) from e
