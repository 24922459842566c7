"""Inquisitor CLI entry point: Click group with subcommands."""

import click

from inquisitor import __version__


@click.group()
@click.version_option(version=__version__, prog_name="inquisitor")
def cli() -> None:
    """Inquisitor - interactive question sessions in the terminal."""


# Import and register subcommands
from inquisitor.cli.ask import ask  # noqa: E402
from inquisitor.cli.log import log  # noqa: E402
from inquisitor.cli.validate import validate  # noqa: E402

cli.add_command(ask)
cli.add_command(validate)
cli.add_command(log)
