"""Main CLI entry point for note-search."""

import click

from .. import __version__
from ..utils.logger import setup_logger
from .commands.search import search_command, tag_command, suggest_command, stats_command


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)")
def cli(log_level):
    """Search and rank personal note entries."""
    setup_logger(level=log_level)


# Register commands
cli.add_command(search_command)
cli.add_command(tag_command)
cli.add_command(suggest_command)
cli.add_command(stats_command)


if __name__ == "__main__":
    cli()
