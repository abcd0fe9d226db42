"""Abstract base class for blob container backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

CONTAINER_NAME = "content"


@dataclass(frozen=True)
class BlobRecord:
    """A blob as reported by the container listing."""

    name: str
    content_type: Optional[str] = None


class BlobContainerClient(ABC):
    """Backend-agnostic interface for the media container."""

    @abstractmethod
    def list_blobs(self) -> Iterator[BlobRecord]:
        """Lazily enumerate every blob. Each call starts a new enumeration."""

    @abstractmethod
    def download_to_file(self, name: str, path: Path) -> None:
        """Stream the blob *name* into the local file *path*, replacing it."""

    @abstractmethod
    def upload_file(self, name: str, path: Path, content_type: str) -> None:
        """Upload *path* as blob *name* with the given content type, overwriting."""

    @abstractmethod
    def delete_blob(self, name: str) -> None:
        """Delete the blob *name*."""
