"""Stylesheet record: one participating CSS file and its place in the import graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from stylegraph.css.nodes import AtRule, Root


@dataclass(eq=False)
class Stylesheet:
    """A stylesheet tracked by a :class:`StylesheetRegistry`.

    Attributes:
        file: Absolute path; ``None`` for anonymous in-memory content.
        content: Text the stylesheet was read from.  Used to detect files
            that were non-empty and became empty.
        root: Parsed syntax tree, mutated in place by the passes.
        layers: Layer names this stylesheet belongs to (own + inherited).
        import_rules: ``@import`` nodes, living in the importing stylesheets,
            that point at this stylesheet.
        parents: Registry ids of the stylesheets that import this one.
        unlink: Marked for deletion.
        derived: Synthesized by the splitter rather than read from disk.
        id: Registry id, assigned by :meth:`StylesheetRegistry.add`.
    """

    file: str | None = None
    content: str | None = None
    root: Root | None = None
    layers: set[str] = field(default_factory=set)
    import_rules: list[AtRule] = field(default_factory=list)
    parents: set[int] = field(default_factory=set)
    unlink: bool = False
    derived: bool = False
    id: int | None = None

    def add_import_rule(self, node: AtRule) -> None:
        if not any(existing is node for existing in self.import_rules):
            self.import_rules.append(node)

    def is_empty(self) -> bool:
        """True when the current tree prints as nothing."""
        return self.root is None or self.root.to_string().strip() == ""

    def was_empty(self) -> bool:
        """True when the stylesheet was read from empty (or blank) text."""
        return self.content is not None and self.content.strip() == ""

    def to_string(self) -> str:
        return self.root.to_string() if self.root is not None else (self.content or "")

    def __repr__(self) -> str:
        return f"Stylesheet(id={self.id!r}, file={self.file!r}, layers={sorted(self.layers)!r})"
