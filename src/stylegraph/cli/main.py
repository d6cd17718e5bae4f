"""Stylegraph CLI entry point: Click group with subcommands."""

import logging

import click

from stylegraph import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylegraph")
@click.option("-v", "--verbose", count=True, help="Log more detail (-vv for debug output).")
def cli(verbose: int) -> None:
    """Stylegraph - split layered utilities out of CSS import graphs."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stylegraph.cli.migrate import migrate  # noqa: E402
from stylegraph.cli.inspect import inspect  # noqa: E402

cli.add_command(migrate)
cli.add_command(inspect)
