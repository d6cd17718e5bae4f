"""Propagate layer membership down the import graph."""

from __future__ import annotations

from stylegraph.model.registry import StylesheetRegistry


def propagate_layers(registry: StylesheetRegistry) -> None:
    """Give every stylesheet the layers declared on any of its ancestors.

    Must run after :func:`build_import_graph` has linked every stylesheet.
    Only each ancestor's own declared layers are unioned in, so the result
    does not depend on iteration order.
    """
    declared = {sheet.id: frozenset(sheet.layers) for sheet in registry}
    for sheet in registry:
        for ancestor in registry.ancestors(sheet):
            sheet.layers |= declared[ancestor.id]
