"""Commands that move media between the portal container and a local folder."""

from typing import Optional

import click

from portal_media_sync.cli.utils import (
    build_management_client,
    build_settings,
    build_sync_engine,
    credential_options,
    error_exit,
    require,
    resolve_token,
)
from portal_media_sync.exceptions import PortalMediaError

endpoint_option = click.option(
    "--endpoint",
    "-e",
    default=None,
    help="Management endpoint of the portal (<name>.management.azure-api.net).",
)


def _container_url(settings) -> str:
    endpoint = require(settings.management_endpoint, "--endpoint")
    token = resolve_token(settings)
    return build_management_client(settings).get_storage_sas_url(endpoint, token)


@click.command(name="download")
@click.argument("folder", required=False, type=click.Path(file_okay=False))
@endpoint_option
@credential_options
def download(folder: Optional[str], endpoint, token, identifier, key, verify_ssl):
    """
    Download all media blobs into FOLDER.

    Each blob is written to FOLDER/<blob name>.<extension>, the extension
    being derived from the blob's content type.
    """
    settings = build_settings(
        management_endpoint=endpoint,
        token=token,
        identifier=identifier,
        key=key,
        verify_ssl=verify_ssl,
        media_folder=folder,
    )
    try:
        container_url = _container_url(settings)
        paths = build_sync_engine(settings).download(container_url, settings.media_folder)
    except PortalMediaError as e:
        error_exit(f"Unable to complete operation. {e}")

    click.echo(f"Downloaded {len(paths)} files to {settings.media_folder}")
    click.echo("DONE")


@click.command(name="upload")
@click.argument("folder", required=False, type=click.Path(file_okay=False))
@endpoint_option
@credential_options
def upload(folder: Optional[str], endpoint, token, identifier, key, verify_ssl):
    """
    Upload every file under FOLDER as a media blob.

    The blob name is the file path relative to FOLDER up to its first dot;
    the content type is guessed from the file extension.
    """
    settings = build_settings(
        management_endpoint=endpoint,
        token=token,
        identifier=identifier,
        key=key,
        verify_ssl=verify_ssl,
        media_folder=folder,
    )
    try:
        container_url = _container_url(settings)
        keys = build_sync_engine(settings).upload(container_url, settings.media_folder)
    except PortalMediaError as e:
        error_exit(f"Unable to complete operation. {e}")

    click.echo(f"Uploaded {len(keys)} files from {settings.media_folder}")
    click.echo("DONE")


@click.command(name="delete")
@endpoint_option
@credential_options
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    default=False,
    help="Confirm deletion of every media blob. Required.",
)
def delete(endpoint, token, identifier, key, verify_ssl, yes: bool):
    """Delete every media blob of the portal. This cannot be undone."""
    if not yes:
        raise click.UsageError("Refusing to delete media without --yes.")

    settings = build_settings(
        management_endpoint=endpoint,
        token=token,
        identifier=identifier,
        key=key,
        verify_ssl=verify_ssl,
    )
    try:
        container_url = _container_url(settings)
        count = build_sync_engine(settings).delete_all(container_url)
    except PortalMediaError as e:
        error_exit(f"Unable to complete operation. {e}")

    click.echo(f"Deleted {count} files")
    click.echo("DONE")
