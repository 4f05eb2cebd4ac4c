"""Exceptions shared by infrastructure implementations."""


class KeyValueStoreError(Exception):
    """Raised when a key-value store operation fails."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        super().__init__(f"Key-value store {operation} failed for key '{key}'")
