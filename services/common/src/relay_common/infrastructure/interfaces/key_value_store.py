"""Abstract interface for persisted key-value storage."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for single-key string storage backends."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Retrieves a value.

        Args:
            key: The storage key.

        Returns:
            The stored value or None if the key was never set.

        Raises:
            KeyValueStoreError: If the backend operation fails.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Stores a value, replacing any previous one.

        Args:
            key: The storage key.
            value: The value to store.

        Raises:
            KeyValueStoreError: If the backend operation fails.
        """
