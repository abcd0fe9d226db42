"""Calls against the developer portal management and publishing endpoints."""

import logging
from typing import Optional

from .exceptions import (
    ManagementApiError,
    MissingCredentialError,
    PublishError,
    RequestError,
)
from .http_client import SignedHttpClient

log = logging.getLogger(__name__)

LIST_SECRETS_PATH = (
    "/subscriptions/00000/resourceGroups/00000/providers/Microsoft.ApiManagement"
    "/service/00000/portalSettings/mediaContent/listSecrets?api-version=2019-12-01"
)


class ManagementApiClient:
    """Thin facade over SignedHttpClient for the portal management API."""

    def __init__(self, http_client: Optional[SignedHttpClient] = None):
        self._http = http_client or SignedHttpClient()

    def get_storage_sas_url(self, endpoint: str, token: str) -> str:
        """
        Retrieve the SAS URL of the media container.

        Args:
            endpoint: Management endpoint host, e.g. ``name.management.azure-api.net``.
            token: Management API credential.

        Raises:
            MissingCredentialError: If no token is given.
            ManagementApiError: If the response carries no ``containerSasUrl``.
            RequestError: If the request itself fails.
        """
        if not token:
            raise MissingCredentialError("Storage connection could not be retrieved")

        url = f"https://{endpoint}{LIST_SECRETS_PATH}"
        response = self._http.send("POST", url, token)

        container_url = response.get("containerSasUrl") if isinstance(response, dict) else None
        if not container_url:
            raise ManagementApiError(f"No media container URL returned by {endpoint}")

        log.info("Retrieved media container URL from %s", endpoint)
        return container_url

    def publish(self, endpoint: str, token: str) -> None:
        """Schedule publishing of the portal served at *endpoint*."""
        url = f"https://{endpoint}/publish"
        try:
            # answers with a bare OK, which SignedHttpClient returns as text
            self._http.send("POST", url, token)
        except RequestError as e:
            raise PublishError(e) from e
        log.info("Publishing scheduled for %s", endpoint)
