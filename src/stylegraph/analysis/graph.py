"""Build the import graph: which ``@import`` rules point at which stylesheets."""

from __future__ import annotations

import logging
import os

from stylegraph.config import UpgradeConfig
from stylegraph.css.imports import import_layers, import_specifier
from stylegraph.css.nodes import AtRule, Node, Root
from stylegraph.css.walk import walk
from stylegraph.errors import ResolveError
from stylegraph.model.diagnostic import Diagnostic, Severity
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.model.stylesheet import Stylesheet
from stylegraph.resolve import Resolver, make_resolver

logger = logging.getLogger(__name__)


def find_imports(root: Root) -> list[AtRule]:
    """Return every ``@import`` at-rule in *root*, in document order."""
    found: list[AtRule] = []

    def visit(node: Node) -> None:
        if isinstance(node, AtRule) and node.name == "import":
            found.append(node)

    walk(root, visit)
    return found


def build_import_graph(
    registry: StylesheetRegistry,
    resolver: Resolver | None = None,
    config: UpgradeConfig | None = None,
) -> list[Diagnostic]:
    """Link every stylesheet to the stylesheets it imports.

    For each ``@import`` whose target resolves to a registered stylesheet,
    the rule is added to the target's ``import_rules``, the importer to its
    ``parents``, and any ``layer(name)`` modifier to its ``layers``.

    Imports that fail to resolve are logged and reported as WARNING
    diagnostics.  Imports that resolve outside the registry (packages,
    untracked files) are skipped silently.
    """
    resolver = resolver or make_resolver(config)
    diagnostics: list[Diagnostic] = []

    for sheet in list(registry):
        if sheet.file is None or sheet.root is None:
            continue
        for node in find_imports(sheet.root):
            diagnostic = _link_import(registry, sheet, sheet.file, node, resolver)
            if diagnostic is not None:
                diagnostics.append(diagnostic)

    return diagnostics


def _link_import(
    registry: StylesheetRegistry,
    parent: Stylesheet,
    parent_file: str,
    node: AtRule,
    resolver: Resolver,
) -> Diagnostic | None:
    specifier = import_specifier(node.params)
    if not specifier:
        logger.debug("Skipping @import with no quoted specifier: %r", node.params)
        return None

    base_dir = os.path.dirname(parent_file)
    try:
        resolved = resolver(specifier, base_dir)
    except (ResolveError, OSError) as exc:
        logger.warning("Failed to resolve import: %s. Skipping. (%s)", specifier, exc)
        return Diagnostic(
            rule="unresolved_import",
            severity=Severity.WARNING,
            message=f"Failed to resolve import {specifier!r}: {exc}",
            file=parent_file,
            specifier=specifier,
        )

    target = registry.get(resolved)
    if target is None:
        return None

    registry.link(parent, target, node)
    for layer in import_layers(node.params):
        target.layers.add(layer)
    logger.debug("%s imports %s (layers=%s)", parent_file, target.file, sorted(target.layers))
    return None
