"""CLI command: stylegraph inspect -- display the import graph and layers."""

from __future__ import annotations

import os
import sys

import click

from stylegraph.analysis import analyze
from stylegraph.css.errors import ParseError
from stylegraph.errors import CyclicImportError
from stylegraph.split.splitter import find_utilities
from stylegraph.storage import load


def _display(file: str | None) -> str:
    return os.path.relpath(file) if file else "<inline>"


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def inspect(files: tuple[str, ...]) -> None:
    """Parse FILES and display their import graph.

    Shows, for every stylesheet, who imports it, which layers it ends up in,
    and how many @utility rules it holds.
    """
    try:
        registry = load(files)
        diagnostics = analyze(registry)
    except ParseError as exc:
        click.echo(f"Parse error in {exc.file}: {exc}", err=True)
        sys.exit(1)
    except CyclicImportError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Stylesheets: {len(registry)}")
    click.echo()
    for sheet in registry:
        parents = ", ".join(_display(p.file) for p in registry.parents(sheet)) or "-"
        layers = ", ".join(sorted(sheet.layers)) or "-"
        utilities = len(find_utilities(sheet.root)) if sheet.root is not None else 0
        click.echo(f"  {_display(sheet.file)}")
        click.echo(f"    imported by: {parents}")
        click.echo(f"    layers:      {layers}")
        if utilities:
            click.echo(f"    utilities:   {utilities}")

    if diagnostics:
        click.echo()
        click.echo("Diagnostics:")
        for diagnostic in diagnostics:
            click.echo(f"  {diagnostic}")
