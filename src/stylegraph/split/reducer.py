"""Drop stylesheets that the splitter emptied, and the imports pointing at them."""

from __future__ import annotations

import logging
import os

from stylegraph.css.imports import import_specifier, replace_specifier
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.model.stylesheet import Stylesheet
from stylegraph.split.naming import sibling_specifier
from stylegraph.split.splitter import SplitResult

logger = logging.getLogger(__name__)


def remove_empty(registry: StylesheetRegistry) -> list[Stylesheet]:
    """Mark emptied stylesheets ``unlink`` until nothing else empties out.

    A stylesheet is unlinked when it had content but now prints as nothing.
    Every ``@import`` of it is removed, which may empty its importers in
    turn, so passes repeat until one marks nothing.
    """
    unlinked: list[Stylesheet] = []
    repeat = True
    while repeat:
        repeat = False
        for sheet in registry:
            if sheet.unlink or sheet.file is None or sheet.root is None:
                continue
            if sheet.was_empty() or not sheet.is_empty():
                continue

            repeat = True
            sheet.unlink = True
            unlinked.append(sheet)
            logger.info("Marking %s for removal", sheet.file)

            for node in sheet.import_rules:
                node.remove()
    return unlinked


def retarget(registry: StylesheetRegistry, sheet: Stylesheet, file: str) -> None:
    """Move *sheet* to *file* and repoint every import of it."""
    for node in sheet.import_rules:
        if node.parent is None or node.source is None or node.source.file is None:
            continue
        specifier = import_specifier(node.params)
        if specifier is None:
            continue
        new_specifier = sibling_specifier(specifier, os.path.dirname(node.source.file), file)
        node.params = replace_specifier(node.params, new_specifier)
    logger.info("Renaming %s to %s", sheet.file, file)
    registry.rename(sheet, file)


def reclaim_names(registry: StylesheetRegistry, result: SplitResult) -> None:
    """Let derived stylesheets take over the paths of removed originals.

    ``a.utilities.css`` becomes ``a.css`` when ``a.css`` was unlinked, so the
    migration doesn't introduce a new file name for content that replaces
    the original.
    """
    for derived in result.created:
        if derived.unlink:
            continue
        for original_id in result.originals_of(derived):
            original = registry.by_id(original_id)
            if not original.unlink or original.file is None:
                continue
            holder = registry.get(original.file)
            if holder is not None and holder is not original and not holder.unlink:
                continue
            retarget(registry, derived, original.file)
            break


def reduce_empty(registry: StylesheetRegistry, result: SplitResult | None = None) -> list[Stylesheet]:
    """Remove emptied stylesheets, then hand their names to derived ones."""
    unlinked = remove_empty(registry)
    if result is not None:
        result.unlinked.extend(unlinked)
        reclaim_names(registry, result)
    return unlinked
