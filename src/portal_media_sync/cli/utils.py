import functools
import sys
from typing import Callable, Optional

import click

from portal_media_sync.config import MediaSyncSettings, load_settings
from portal_media_sync.http_client import SignedHttpClient
from portal_media_sync.management import ManagementApiClient
from portal_media_sync.storage.azure_client import AzureBlobContainerClient
from portal_media_sync.sync_engine import BlobSyncEngine
from portal_media_sync.tokens import resolve_credential


def error_exit(message: str, code: int = 1):
    """Print *message* to stderr and terminate with *code*."""
    click.echo(click.style(message, fg="red"), err=True)
    sys.exit(code)


def credential_options(func: Callable) -> Callable:
    """Attach the management API credential options shared by all commands."""

    @click.option(
        "--token",
        default=None,
        help="A SAS token for the portal (SharedAccessSignature ...).",
    )
    @click.option(
        "--id",
        "identifier",
        default=None,
        help="The management API identifier, usually 'integration'. Requires --key.",
    )
    @click.option(
        "--key",
        default=None,
        help="The management API key (primary or secondary). Requires --id.",
    )
    @click.option(
        "--insecure",
        is_flag=True,
        default=False,
        help="Do not verify TLS certificates for this invocation.",
    )
    @functools.wraps(func)
    def wrapper(*args, token, identifier, key, insecure, **kwargs):
        if token and (identifier or key):
            raise click.UsageError("--token cannot be combined with --id/--key.")
        if bool(identifier) != bool(key):
            raise click.UsageError("--id and --key must be given together.")
        # a credential given on the command line replaces the other kind from the environment
        if token:
            identifier = key = ""
        elif identifier:
            token = ""
        return func(
            *args,
            token=token,
            identifier=identifier,
            key=key,
            verify_ssl=False if insecure else None,
            **kwargs,
        )

    return wrapper


def build_settings(**overrides) -> MediaSyncSettings:
    try:
        return load_settings(**overrides)
    except ValueError as e:
        error_exit(f"Invalid configuration. {e}")


def resolve_token(settings: MediaSyncSettings) -> str:
    return resolve_credential(
        settings.token,
        settings.identifier,
        settings.key,
        expires_in=settings.token_expires_in,
    )


def build_management_client(settings: MediaSyncSettings) -> ManagementApiClient:
    http_client = SignedHttpClient(
        verify_ssl=settings.verify_ssl, timeout=settings.http_timeout
    )
    return ManagementApiClient(http_client)


def build_sync_engine(settings: MediaSyncSettings) -> BlobSyncEngine:
    def client_factory(container_url: str) -> AzureBlobContainerClient:
        return AzureBlobContainerClient.from_container_url(
            container_url, connection_verify=settings.verify_ssl
        )

    return BlobSyncEngine(client_factory=client_factory)


def require(value: Optional[str], option: str) -> str:
    if not value:
        raise click.UsageError(f"Missing {option} (or its environment variable).")
    return value
