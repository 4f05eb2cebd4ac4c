from relay_common.infrastructure.interfaces import KeyValueStore

__all__ = ["KeyValueStore"]
