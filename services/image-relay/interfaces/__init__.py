"""Abstract interfaces for infrastructure dependencies."""

from relay_common.infrastructure.interfaces import KeyValueStore

from .image_host import ImageHostClient

__all__ = ["ImageHostClient", "KeyValueStore"]
