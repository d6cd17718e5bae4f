"""Utility splitting and empty-file reduction."""

from __future__ import annotations

from stylegraph.config import UpgradeConfig
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.split.naming import derived_path, sibling_specifier
from stylegraph.split.reducer import reclaim_names, reduce_empty, remove_empty, retarget
from stylegraph.split.splitter import SplitResult, find_utilities, split_utilities

__all__ = [
    "split",
    "split_utilities",
    "find_utilities",
    "reduce_empty",
    "remove_empty",
    "reclaim_names",
    "retarget",
    "SplitResult",
    "derived_path",
    "sibling_specifier",
]


def split(registry: StylesheetRegistry, config: UpgradeConfig | None = None) -> SplitResult:
    """Split utilities into derived stylesheets, then reduce emptied files."""
    result = split_utilities(registry, config=config)
    reduce_empty(registry, result)
    return result
