import os

import click
from dotenv import find_dotenv, load_dotenv

from portal_media_sync.cli import __version__
from portal_media_sync.cli.commands.media_cmd import delete, download, upload
from portal_media_sync.cli.commands.publish_cmd import publish
from portal_media_sync.logging_config import setup_colored_logging


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.version_option(
    __version__, "-v", "--version", help="Show the CLI version and exit."
)
@click.option(
    "-u",
    "--system-env",
    is_flag=True,
    default=False,
    help="Use system environment variables only; do not load .env file.",
)
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to $LOG_LEVEL or INFO.",
)
def cli(system_env: bool, log_level: str | None):
    """Developer portal media synchronization."""
    if not system_env:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    setup_colored_logging(level=log_level or os.getenv("LOG_LEVEL", "INFO"))


cli.add_command(download)
cli.add_command(upload)
cli.add_command(delete)
cli.add_command(publish)


def main():
    cli()


if __name__ == "__main__":
    main()
