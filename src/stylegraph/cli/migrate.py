"""CLI command: stylegraph migrate -- split utilities and rewrite stylesheets."""

from __future__ import annotations

import os
import sys

import click

from stylegraph.css.errors import ParseError
from stylegraph.errors import CyclicImportError
from stylegraph.migrate import run
from stylegraph.storage import commit, load, plan


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--dry-run", is_flag=True, help="Show what would change without touching any file.")
def migrate(files: tuple[str, ...], dry_run: bool) -> None:
    """Split @utility rules out of layered imports and rewrite FILES in place.

    Every stylesheet that takes part in the import graph must be listed;
    imports of files that are not listed are left alone.
    """
    try:
        registry = load(files)
        report = run(registry)
    except ParseError as exc:
        location = f"{exc.file}:{exc.line}" if exc.line else (exc.file or "<input>")
        click.echo(f"Parse error in {location}: {exc}", err=True)
        sys.exit(1)
    except CyclicImportError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for diagnostic in report.diagnostics:
        click.echo(str(diagnostic), err=True)

    result = plan(registry) if dry_run else commit(registry)
    prefix = "would " if dry_run else ""

    for file in result.deletes:
        click.echo(f"{prefix}delete {os.path.relpath(file)}")
    for file in result.writes:
        click.echo(f"{prefix}write  {os.path.relpath(file)}")
    if not result.writes and not result.deletes:
        click.echo("Nothing to migrate.")
