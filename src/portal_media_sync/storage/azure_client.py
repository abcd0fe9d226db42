"""Azure Blob Storage container client."""

import logging
from pathlib import Path
from typing import Iterator

from azure.core.exceptions import (
    AzureError,
    HttpResponseError,
    ResourceNotFoundError,
    ServiceRequestError,
)
from azure.storage.blob import BlobServiceClient, ContentSettings

from .base import CONTAINER_NAME, BlobContainerClient, BlobRecord
from .exceptions import (
    StorageConnectionError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)

log = logging.getLogger(__name__)


class AzureBlobContainerClient(BlobContainerClient):
    """Azure Blob Storage client bound to the portal media container."""

    def __init__(
        self,
        account_url: str,
        container_name: str = CONTAINER_NAME,
        connection_verify: bool = True,
    ):
        self._container_name = container_name
        self._service_client = BlobServiceClient(
            account_url=account_url, connection_verify=connection_verify
        )
        self._container_client = self._service_client.get_container_client(container_name)

    @classmethod
    def from_container_url(
        cls, container_url: str, connection_verify: bool = True
    ) -> "AzureBlobContainerClient":
        """
        Build a client from a container SAS URL as returned by ``listSecrets``.

        The SAS URL addresses the ``content`` container directly; the account
        URL is obtained by dropping the container segment and keeping the
        SAS query string.
        """
        account_url = container_url.replace(f"/{CONTAINER_NAME}", "", 1)
        return cls(account_url, connection_verify=connection_verify)

    def list_blobs(self) -> Iterator[BlobRecord]:
        try:
            for blob in self._container_client.list_blobs():
                settings = blob.content_settings
                yield BlobRecord(
                    name=blob.name,
                    content_type=settings.content_type if settings else None,
                )
        except (AzureError, ConnectionError) as e:
            raise self._translate_error(e) from e

    def download_to_file(self, name: str, path: Path) -> None:
        try:
            downloader = self._container_client.download_blob(name)
            with open(path, "wb") as fh:
                downloader.readinto(fh)
        except (AzureError, ConnectionError) as e:
            raise self._translate_error(e, name) from e

    def upload_file(self, name: str, path: Path, content_type: str) -> None:
        try:
            with open(path, "rb") as data:
                self._container_client.upload_blob(
                    name=name,
                    data=data,
                    overwrite=True,
                    content_settings=ContentSettings(content_type=content_type),
                )
        except (AzureError, ConnectionError) as e:
            raise self._translate_error(e, name) from e

    def delete_blob(self, name: str) -> None:
        try:
            self._container_client.delete_blob(name)
        except (AzureError, ConnectionError) as e:
            raise self._translate_error(e, name) from e

    def _translate_error(self, error: Exception, key: str | None = None) -> StorageError:
        if isinstance(error, ResourceNotFoundError):
            return StorageNotFoundError(str(error), key=key, cause=error)
        if isinstance(error, HttpResponseError) and error.status_code in (401, 403):
            return StoragePermissionError(str(error), key=key, cause=error)
        if isinstance(error, (ServiceRequestError, ConnectionError)):
            return StorageConnectionError(str(error), key=key, cause=error)
        return StorageError(str(error), key=key, cause=error)
