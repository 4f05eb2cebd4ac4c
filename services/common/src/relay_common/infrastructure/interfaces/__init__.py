from relay_common.infrastructure.interfaces.key_value_store import KeyValueStore

__all__ = ["KeyValueStore"]
