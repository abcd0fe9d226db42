"""Blob container access for portal media."""

from .base import CONTAINER_NAME, BlobContainerClient, BlobRecord
from .exceptions import (
    StorageConnectionError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)

__all__ = [
    "CONTAINER_NAME",
    "BlobContainerClient",
    "BlobRecord",
    "StorageError",
    "StorageNotFoundError",
    "StoragePermissionError",
    "StorageConnectionError",
]
