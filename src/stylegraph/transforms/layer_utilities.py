"""Layer utilities transform: turns ``@layer utilities`` class rules into ``@utility``."""

from __future__ import annotations

import re

from stylegraph.css.nodes import AtRule, Comment, Root, Rule
from stylegraph.model.stylesheet import Stylesheet

# A single class selector: `.btn`, `.w-1\/2`.
_CLASS_RE = re.compile(r"^\.((?:[-\w]|\\.)+)$")


class LayerUtilitiesTransform:
    """Rewrite ``@layer utilities { .name { ... } }`` into ``@utility name { ... }``.

    Only top-level ``@layer`` blocks named in *layers* are touched, and only
    rules whose selector is a single class.  Converted utilities are hoisted
    right after the ``@layer`` block, which is dropped once nothing but
    comments is left in it.
    """

    def __init__(
        self,
        layers: tuple[str, ...] = ("utilities", "components"),
        at_rule: str = "utility",
    ) -> None:
        self.layers = layers
        self.at_rule = at_rule

    def apply(self, root: Root, stylesheet: Stylesheet | None = None) -> None:
        for node in list(root.nodes):
            if not isinstance(node, AtRule) or node.name != "layer" or not node.has_block:
                continue
            if node.params.strip() not in self.layers:
                continue
            self._convert(root, node)

    def _convert(self, root: Root, layer: AtRule) -> None:
        utilities: list[AtRule] = []
        for child in list(layer.nodes):
            if not isinstance(child, Rule):
                continue
            match = _CLASS_RE.match(child.selector.strip())
            if not match:
                continue
            utility = AtRule(self.at_rule, match.group(1), nodes=[], source=child.source)
            utility.append(*child.nodes)
            child.remove()
            utilities.append(utility)

        if not utilities:
            return
        root.insert_after(layer, *utilities)
        if all(isinstance(child, Comment) for child in layer.nodes):
            layer.remove()
