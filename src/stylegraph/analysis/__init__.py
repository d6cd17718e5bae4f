"""Import graph analysis: graph building and layer propagation."""

from __future__ import annotations

from stylegraph.analysis.graph import build_import_graph, find_imports
from stylegraph.analysis.layers import propagate_layers
from stylegraph.config import UpgradeConfig
from stylegraph.model.diagnostic import Diagnostic
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.resolve import Resolver

__all__ = ["analyze", "build_import_graph", "find_imports", "propagate_layers"]


def analyze(
    registry: StylesheetRegistry,
    resolver: Resolver | None = None,
    config: UpgradeConfig | None = None,
) -> list[Diagnostic]:
    """Build the import graph, then propagate layers through it."""
    diagnostics = build_import_graph(registry, resolver=resolver, config=config)
    propagate_layers(registry)
    return diagnostics
