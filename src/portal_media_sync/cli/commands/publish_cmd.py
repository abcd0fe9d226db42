import click

from portal_media_sync.cli.utils import (
    build_management_client,
    build_settings,
    credential_options,
    error_exit,
    require,
    resolve_token,
)
from portal_media_sync.exceptions import PortalMediaError


@click.command(name="publish")
@click.option(
    "--publish-endpoint",
    "-p",
    default=None,
    help="Endpoint of the managed developer portal (<name>.developer.azure-api.net).",
)
@credential_options
def publish(publish_endpoint, token, identifier, key, verify_ssl):
    """Publish the managed developer portal. Unsupported for self-hosted portals."""
    settings = build_settings(
        publish_endpoint=publish_endpoint,
        token=token,
        identifier=identifier,
        key=key,
        verify_ssl=verify_ssl,
    )
    endpoint = require(settings.publish_endpoint, "--publish-endpoint")
    try:
        token = resolve_token(settings)
        build_management_client(settings).publish(endpoint, token)
    except PortalMediaError as e:
        error_exit(f"Unable to complete operation. {e}")

    click.echo("DONE")
