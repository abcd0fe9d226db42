"""Bulk transfer of portal media between the blob container and a local folder."""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from .content_types import ContentTypeRegistry
from .exceptions import DeleteError, DownloadError, UploadError
from .storage.base import BlobContainerClient, BlobRecord

log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]
ClientFactory = Callable[[str], BlobContainerClient]


def _default_client_factory(container_url: str) -> BlobContainerClient:
    from .storage.azure_client import AzureBlobContainerClient

    return AzureBlobContainerClient.from_container_url(container_url)


def iter_local_files(root: Path) -> Iterator[Path]:
    """Yield every regular file under *root*, walking directories with a stack."""
    pending = [root]
    while pending:
        directory = pending.pop()
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(Path(entry.path))
                elif entry.is_file():
                    yield Path(entry.path)


class BlobSyncEngine:
    """
    Downloads, uploads and deletes every blob of the media container.

    Blob names map to local paths by appending the extension registered for
    the blob's content type (``a/b`` + ``image/png`` -> ``a/b.png``). On
    upload the path relative to the local root is cut at its first ``.`` to
    recover the blob name, and the content type is guessed from the
    extension. Names with dots in directory segments or double extensions
    (``a.tar.gz``) therefore do not survive a round trip.

    Transfers run one at a time; the first failure aborts the operation and
    is raised wrapped in the operation's error type.
    """

    def __init__(
        self,
        client_factory: Optional[ClientFactory] = None,
        registry: Optional[ContentTypeRegistry] = None,
    ):
        self._client_factory = client_factory or _default_client_factory
        self._registry = registry or ContentTypeRegistry()

    def local_path_for(self, blob: BlobRecord, local_root: PathLike) -> Path:
        root = Path(local_root)
        extension = self._registry.extension_for(blob.content_type)
        relative = f"{blob.name}.{extension}" if extension else blob.name
        path = root / relative
        if not path.resolve().is_relative_to(root.resolve()):
            raise ValueError(f"Blob name '{blob.name}' points outside of {root}")
        return path

    @staticmethod
    def blob_key_for(path: PathLike, local_root: PathLike) -> str:
        relative = Path(path).relative_to(local_root).as_posix()
        key = relative.split(".")[0]
        if not key:
            raise ValueError(f"Cannot derive a blob name from '{relative}'")
        return key

    def download(self, container_url: str, local_root: PathLike) -> list[Path]:
        """Download every blob into *local_root*. Returns the written paths."""
        root = Path(local_root)
        written: list[Path] = []
        try:
            root.mkdir(parents=True, exist_ok=True)
            client = self._client_factory(container_url)

            for blob in client.list_blobs():
                path = self.local_path_for(blob, root)
                path.parent.mkdir(parents=True, exist_ok=True)
                client.download_to_file(blob.name, path)
                written.append(path)
                log.debug("Downloaded %s -> %s", blob.name, path)
        except Exception as e:
            raise DownloadError(e) from e

        log.info("Downloaded %d media files into %s", len(written), root)
        return written

    def upload(self, container_url: str, local_root: PathLike) -> list[str]:
        """Upload every file under *local_root*. Returns the blob names written."""
        root = Path(local_root)
        uploaded: list[str] = []
        try:
            client = self._client_factory(container_url)

            for path in iter_local_files(root):
                key = self.blob_key_for(path, root)
                content_type = self._registry.content_type_for(path)
                client.upload_file(key, path, content_type)
                uploaded.append(key)
                log.debug("Uploaded %s -> %s (%s)", path, key, content_type)
        except Exception as e:
            raise UploadError(e) from e

        log.info("Uploaded %d media files from %s", len(uploaded), root)
        return uploaded

    def delete_all(self, container_url: str) -> int:
        """Delete every blob in the container. Returns the number deleted."""
        deleted = 0
        try:
            client = self._client_factory(container_url)

            for blob in client.list_blobs():
                client.delete_blob(blob.name)
                deleted += 1
                log.debug("Deleted %s", blob.name)
        except Exception as e:
            raise DeleteError(e) from e

        log.info("Deleted %d media files", deleted)
        return deleted
