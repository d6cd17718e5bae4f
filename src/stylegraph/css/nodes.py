"""CSS syntax tree: Root, AtRule, Rule, Declaration, and Comment nodes.

Nodes are mutable and addressed by identity.  Containers own their children;
moving a node into another container detaches it from its previous parent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

INDENT = "  "


@dataclass(frozen=True)
class Source:
    """Where a node was parsed from."""

    file: str | None = None
    line: int | None = None
    column: int | None = None


class Node:
    """Base class for every syntax tree node."""

    type = "node"

    def __init__(self, source: Source | None = None, raws: dict[str, Any] | None = None) -> None:
        self.parent: Container | None = None
        self.source = source
        self.raws: dict[str, Any] = dict(raws or {})

    def remove(self) -> Node:
        """Detach this node from its parent (no-op when already detached)."""
        if self.parent is not None:
            self.parent.remove_child(self)
        return self

    def root(self) -> Node:
        node: Node = self
        while node.parent is not None:
            node = node.parent
        return node

    def clone(self, **overrides: Any) -> Node:
        raise NotImplementedError

    def clone_after(self, **overrides: Any) -> Node:
        """Clone this node and insert the copy right after it."""
        if self.parent is None:
            raise ValueError("Cannot insert a clone after a detached node")
        copy = self.clone(**overrides)
        self.parent.insert_after(self, copy)
        return copy

    def to_string(self, depth: int = 0) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_string()


class Container(Node):
    """A node that holds an ordered list of children."""

    def __init__(
        self,
        nodes: Iterable[Node] | None = None,
        source: Source | None = None,
        raws: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(source=source, raws=raws)
        self.nodes: list[Node] = []
        if nodes is not None:
            self.append(*nodes)

    def _adopt(self, nodes: Iterable[Node]) -> list[Node]:
        adopted = list(nodes)
        for node in adopted:
            node.remove()
            node.parent = self
        return adopted

    def append(self, *nodes: Node) -> Container:
        self.nodes.extend(self._adopt(nodes))
        return self

    def prepend(self, *nodes: Node) -> Container:
        self.nodes[0:0] = self._adopt(nodes)
        return self

    def insert_after(self, existing: Node, *nodes: Node) -> Container:
        adopted = self._adopt(nodes)
        index = self.index(existing)
        self.nodes[index + 1:index + 1] = adopted
        return self

    def index(self, child: Node) -> int:
        for i, node in enumerate(self.nodes):
            if node is child:
                return i
        raise ValueError("Node is not a child of this container")

    def remove_child(self, child: Node) -> None:
        del self.nodes[self.index(child)]
        child.parent = None

    def _block(self, depth: int) -> str:
        if not self.nodes:
            return "{}"
        inner = "\n".join(
            INDENT * (depth + 1) + node.to_string(depth + 1) for node in self.nodes
        )
        return "{\n" + inner + "\n" + INDENT * depth + "}"


def _is_block(node: Node) -> bool:
    return isinstance(node, Container) and node.nodes is not None


class Root(Container):
    """The top of a parsed stylesheet."""

    type = "root"

    def clone(self, **overrides: Any) -> Root:
        copy = Root(
            nodes=[node.clone() for node in self.nodes],
            source=overrides.get("source", self.source),
            raws=overrides.get("raws", self.raws),
        )
        return copy

    def to_string(self, depth: int = 0) -> str:
        parts: list[str] = []
        for i, node in enumerate(self.nodes):
            text = node.to_string(0)
            # Blank line between a block and whatever follows it.
            if i and (_is_block(node) or _is_block(self.nodes[i - 1])):
                parts.append("")
            parts.append(text)
        return "\n".join(parts) + ("\n" if parts else "")


class AtRule(Container):
    """An at-rule such as ``@import "./a.css";`` or ``@utility foo { ... }``.

    ``nodes`` is ``None`` for statement at-rules and a list for block at-rules.
    ``injected`` marks at-rules created by a migration pass rather than
    present in the original source.
    """

    type = "atrule"

    def __init__(
        self,
        name: str,
        params: str = "",
        nodes: Iterable[Node] | None = None,
        source: Source | None = None,
        raws: dict[str, Any] | None = None,
        injected: bool = False,
    ) -> None:
        super().__init__(nodes=nodes, source=source, raws=raws)
        self.name = name
        self.params = params
        self.injected = injected
        if nodes is None:
            self.nodes = None  # type: ignore[assignment]

    @property
    def has_block(self) -> bool:
        return self.nodes is not None

    def append(self, *nodes: Node) -> Container:
        if self.nodes is None:
            self.nodes = []
        return super().append(*nodes)

    def prepend(self, *nodes: Node) -> Container:
        if self.nodes is None:
            self.nodes = []
        return super().prepend(*nodes)

    def clone(self, **overrides: Any) -> AtRule:
        return AtRule(
            name=overrides.get("name", self.name),
            params=overrides.get("params", self.params),
            nodes=None if self.nodes is None else [node.clone() for node in self.nodes],
            source=overrides.get("source", self.source),
            raws=overrides.get("raws", self.raws),
            injected=overrides.get("injected", self.injected),
        )

    def to_string(self, depth: int = 0) -> str:
        head = f"@{self.name} {self.params}" if self.params else f"@{self.name}"
        if self.nodes is None:
            return head + ";"
        return head + " " + self._block(depth)

    def __repr__(self) -> str:
        return f"AtRule(name={self.name!r}, params={self.params!r})"


class Rule(Container):
    """A qualified rule: ``selector { ... }``."""

    type = "rule"

    def __init__(
        self,
        selector: str,
        nodes: Iterable[Node] | None = None,
        source: Source | None = None,
        raws: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(nodes=nodes, source=source, raws=raws)
        self.selector = selector

    def clone(self, **overrides: Any) -> Rule:
        return Rule(
            selector=overrides.get("selector", self.selector),
            nodes=[node.clone() for node in self.nodes],
            source=overrides.get("source", self.source),
            raws=overrides.get("raws", self.raws),
        )

    def to_string(self, depth: int = 0) -> str:
        return f"{self.selector} " + self._block(depth)

    def __repr__(self) -> str:
        return f"Rule(selector={self.selector!r})"


class Declaration(Node):
    """A ``prop: value`` declaration."""

    type = "decl"

    def __init__(
        self,
        prop: str,
        value: str,
        source: Source | None = None,
        raws: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(source=source, raws=raws)
        self.prop = prop
        self.value = value

    def clone(self, **overrides: Any) -> Declaration:
        return Declaration(
            prop=overrides.get("prop", self.prop),
            value=overrides.get("value", self.value),
            source=overrides.get("source", self.source),
            raws=overrides.get("raws", self.raws),
        )

    def to_string(self, depth: int = 0) -> str:
        return f"{self.prop}: {self.value};"

    def __repr__(self) -> str:
        return f"Declaration(prop={self.prop!r}, value={self.value!r})"


class Comment(Node):
    """A ``/* ... */`` comment; ``text`` excludes the delimiters."""

    type = "comment"

    def __init__(
        self,
        text: str,
        source: Source | None = None,
        raws: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(source=source, raws=raws)
        self.text = text

    def clone(self, **overrides: Any) -> Comment:
        return Comment(
            text=overrides.get("text", self.text),
            source=overrides.get("source", self.source),
            raws=overrides.get("raws", self.raws),
        )

    def to_string(self, depth: int = 0) -> str:
        return f"/* {self.text} */"
