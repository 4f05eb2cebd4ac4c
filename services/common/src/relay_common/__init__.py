from relay_common.config import RedisConfig
from relay_common.exceptions import KeyValueStoreError
from relay_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "KeyValueStoreError",
    "RedisConfig",
]
