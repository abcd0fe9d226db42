"""Common exception hierarchy for blob container backends."""

from ..exceptions import PortalMediaError


class StorageError(PortalMediaError):
    """Base exception for all storage operations."""

    def __init__(self, message: str, key: str | None = None, cause: Exception | None = None):
        self.key = key
        super().__init__(message, cause=cause)


class StorageNotFoundError(StorageError):
    """Raised when a requested blob or the container does not exist."""


class StoragePermissionError(StorageError):
    """Raised when the SAS URL is invalid, expired or lacks a permission."""


class StorageConnectionError(StorageError):
    """Raised when the storage backend is unreachable."""
