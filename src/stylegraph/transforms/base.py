"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from stylegraph.css.nodes import Root
from stylegraph.model.stylesheet import Stylesheet


class Transform(Protocol):
    """An in-place rewrite of one stylesheet's syntax tree."""

    def apply(self, root: Root, stylesheet: Stylesheet) -> None: ...
