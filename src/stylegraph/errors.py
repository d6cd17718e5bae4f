"""Error types raised by the import graph and migration passes."""

from __future__ import annotations


class StylegraphError(Exception):
    """Base class for errors raised by stylegraph."""


class MigrationError(StylegraphError):
    """Raised when a stylesheet cannot be migrated (e.g. it has no file path)."""


class ResolveError(StylegraphError):
    """Raised when an import specifier does not resolve to a file."""

    def __init__(self, specifier: str, base_dir: str) -> None:
        self.specifier = specifier
        self.base_dir = base_dir
        super().__init__(f"Can't resolve {specifier!r} in {base_dir!r}")


class CyclicImportError(StylegraphError):
    """Raised when ``@import`` rules form a cycle."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__("Cyclic @import chain: " + " -> ".join(cycle))
