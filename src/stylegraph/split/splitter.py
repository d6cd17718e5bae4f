"""Move ``@utility`` definitions out of layered stylesheets into derived files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from stylegraph.config import UpgradeConfig
from stylegraph.css.imports import import_specifier, plain_import_params, replace_specifier
from stylegraph.css.nodes import AtRule, Node, Root
from stylegraph.css.walk import WalkAction, walk
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.model.stylesheet import Stylesheet
from stylegraph.split.naming import derived_path, sibling_specifier

logger = logging.getLogger(__name__)


@dataclass
class SplitResult:
    """What the splitter (and then the reducer) did.

    Attributes:
        derived: Original stylesheet id -> the derived stylesheet holding its
            utilities.  Several originals may share one derived stylesheet.
        created: Derived stylesheets added to the registry, in creation order.
        unlinked: Stylesheets the reducer marked for deletion.
    """

    derived: dict[int, Stylesheet] = field(default_factory=dict)
    created: list[Stylesheet] = field(default_factory=list)
    unlinked: list[Stylesheet] = field(default_factory=list)

    def originals_of(self, derived: Stylesheet) -> list[int]:
        return [sheet_id for sheet_id, d in self.derived.items() if d is derived]


def find_utilities(root: Root, at_rule: str = "utility") -> list[AtRule]:
    """Return utility at-rules in document order, not looking inside matches."""
    found: list[AtRule] = []

    def visit(node: Node) -> WalkAction | None:
        if isinstance(node, AtRule) and node.name == at_rule:
            found.append(node)
            return WalkAction.SKIP
        return None

    walk(root, visit)
    return found


def _naming_edges(sheet: Stylesheet) -> list[tuple[AtRule, str]]:
    """Import rules of *sheet* that can name its derived stylesheet, with their files."""
    edges: list[tuple[AtRule, str]] = []
    for node in sheet.import_rules:
        # Added by an earlier migration pass, so the name isn't the user's.
        if node.injected:
            continue
        if node.parent is None:
            continue
        if node.source is None or node.source.file is None:
            continue
        if not import_specifier(node.params):
            continue
        edges.append((node, node.source.file))
    return edges


def _splits_onto_itself(
    sheet: Stylesheet,
    nodes: list[AtRule],
    edges: list[tuple[AtRule, str]],
    path: str,
    taken: bool,
) -> bool:
    """True when splitting *sheet* could only recreate it under its own name.

    That is the case for a stylesheet holding nothing but utilities, reached
    only through plain imports, whose derived path is free: the reducer would
    unlink it and hand its name and import specifiers straight back to the
    derived copy.
    """
    if taken or sheet.root is None or sheet.file is None:
        return False
    if len(nodes) != len(sheet.root.nodes):
        return False
    if any(node.parent is not sheet.root for node in nodes):
        return False
    if len(edges) != len(sheet.import_rules):
        return False
    for edge, importer in edges:
        if edge.params.strip() != plain_import_params(edge.params):
            return False
        specifier = import_specifier(edge.params) or ""
        importer_dir = os.path.dirname(importer)
        renamed = sibling_specifier(specifier, importer_dir, path)
        if sibling_specifier(renamed, importer_dir, sheet.file) != specifier:
            return False
    return True


def split_utilities(
    registry: StylesheetRegistry,
    config: UpgradeConfig | None = None,
) -> SplitResult:
    """Extract utility nodes from stylesheets imported into a split layer.

    For every stylesheet whose ``layers`` include one of
    ``config.split_layers`` and that contains utility at-rules:

    - the utilities are moved into a derived stylesheet named after the
      import site (``a.css`` -> ``a.utilities.css``), next to the original;
    - a plain ``@import`` of the derived file is inserted right after every
      import rule that reaches the original.

    Derived stylesheets that land on the same path are merged, with the
    later content placed first.  A utilities-only stylesheet that is already
    imported plainly is left where it is.
    """
    config = config or UpgradeConfig()
    split_layers = set(config.split_layers)
    result = SplitResult()
    by_path: dict[str, Stylesheet] = {}
    inserted: set[tuple[str, str]] = set()

    for sheet in list(registry):
        if sheet.root is None or sheet.file is None or sheet.derived:
            continue
        if not sheet.layers & split_layers:
            continue

        nodes = find_utilities(sheet.root, config.utility_at_rule)
        if not nodes:
            continue

        edges = _naming_edges(sheet)
        if not edges:
            logger.info("Not splitting %s: no import rule to name it after", sheet.file)
            continue

        path = derived_path(sheet.file, import_specifier(edges[0][0].params) or "", config)
        taken = path in by_path or registry.get(path) is not None
        if _splits_onto_itself(sheet, nodes, edges, path, taken):
            logger.debug("Not splitting %s: it already holds only utilities", sheet.file)
            continue

        utilities = Root(raws={"pretty": True})
        utilities.append(*nodes)

        derived = _merge(registry, by_path, path, utilities, result)
        result.derived[sheet.id] = derived  # type: ignore[index]
        logger.info("Moved %d utilities from %s to %s", len(nodes), sheet.file, path)

        for edge, importer in edges:
            _insert_import(edge, importer, path, derived, inserted)

    _mirror_parents(registry, result)
    return result


def _merge(
    registry: StylesheetRegistry,
    by_path: dict[str, Stylesheet],
    path: str,
    utilities: Root,
    result: SplitResult,
) -> Stylesheet:
    derived = by_path.get(path) or registry.get(path)
    if derived is None:
        derived = registry.add(Stylesheet(file=path, root=utilities, derived=True))
        result.created.append(derived)
    elif derived.root is None:
        derived.root = utilities
    else:
        # Later-discovered utilities go first.
        logger.debug("Merging utilities into %s", path)
        derived.root.prepend(*utilities.nodes)
    by_path[path] = derived
    return derived


def _insert_import(
    edge: AtRule,
    importer: str,
    path: str,
    derived: Stylesheet,
    inserted: set[tuple[str, str]],
) -> None:
    specifier = import_specifier(edge.params) or ""
    new_specifier = sibling_specifier(specifier, os.path.dirname(importer), path)
    # Utilities are global: no layer, media, or supports modifiers.
    params = replace_specifier(plain_import_params(edge.params), new_specifier)

    key = (importer, params)
    if key in inserted or edge.parent is None:
        return
    inserted.add(key)

    node = edge.clone(params=params, injected=True, raws={"pretty": True})
    edge.parent.insert_after(edge, node)
    derived.add_import_rule(node)


def _mirror_parents(registry: StylesheetRegistry, result: SplitResult) -> None:
    """Point each derived stylesheet at the parents of its originals.

    A parent that was split as well is replaced by its own derived
    stylesheet, so the derived graph mirrors the original one.
    """
    for original_id, derived in result.derived.items():
        original = registry.by_id(original_id)
        parents = set(derived.parents)
        for parent_id in original.parents:
            mapped = result.derived.get(parent_id)
            parents.add(mapped.id if mapped is not None else parent_id)  # type: ignore[arg-type]
        parents.discard(derived.id)  # type: ignore[arg-type]
        registry.set_parents(derived, parents)
