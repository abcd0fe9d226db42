"""
Portal media synchronization.

Mirrors the media container of a developer portal to a local folder and
back, and talks to the portal management API with SAS credentials.

Components:
- resolve_credential / generate_sas_token: management API credentials
- SignedHttpClient: authenticated management API requests
- ManagementApiClient: media container lookup and portal publishing
- BlobSyncEngine: bulk download, upload and deletion of media blobs
"""

from .content_types import DEFAULT_CONTENT_TYPE, ContentTypeRegistry
from .exceptions import (
    DeleteError,
    DownloadError,
    ForbiddenError,
    ManagementApiError,
    MediaSyncError,
    MissingCredentialError,
    NotFoundError,
    PortalMediaError,
    PublishError,
    RequestError,
    TransportError,
    UnauthorizedError,
    UnhandledResponseError,
    UploadError,
)
from .http_client import SignedHttpClient
from .management import ManagementApiClient
from .storage import BlobContainerClient, BlobRecord
from .sync_engine import BlobSyncEngine
from .tokens import generate_sas_token, resolve_credential

__version__ = "1.0.0"

__all__ = [
    "BlobContainerClient",
    "BlobRecord",
    "BlobSyncEngine",
    "ContentTypeRegistry",
    "DEFAULT_CONTENT_TYPE",
    "DeleteError",
    "DownloadError",
    "ForbiddenError",
    "ManagementApiClient",
    "ManagementApiError",
    "MediaSyncError",
    "MissingCredentialError",
    "NotFoundError",
    "PortalMediaError",
    "PublishError",
    "RequestError",
    "SignedHttpClient",
    "TransportError",
    "UnauthorizedError",
    "UnhandledResponseError",
    "UploadError",
    "generate_sas_token",
    "resolve_credential",
]
