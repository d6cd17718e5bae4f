"""CSS syntax tree, parser, and traversal helpers."""

from stylegraph.css.errors import ParseError
from stylegraph.css.imports import (
    import_layers,
    import_specifier,
    plain_import_params,
    replace_specifier,
)
from stylegraph.css.nodes import AtRule, Comment, Container, Declaration, Node, Root, Rule, Source
from stylegraph.css.parser import parse_css
from stylegraph.css.segment import segment
from stylegraph.css.walk import WalkAction, walk

__all__ = [
    "parse_css",
    "ParseError",
    # nodes
    "Node",
    "Container",
    "Root",
    "AtRule",
    "Rule",
    "Declaration",
    "Comment",
    "Source",
    # traversal
    "walk",
    "WalkAction",
    # params
    "segment",
    "import_specifier",
    "import_layers",
    "replace_specifier",
    "plain_import_params",
]
