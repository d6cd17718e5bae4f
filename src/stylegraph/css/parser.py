"""Lark Transformer that converts a CSS parse tree into a syntax tree of nodes."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from lark import Lark, Token, Transformer

from stylegraph.css.errors import ParseError
from stylegraph.css.nodes import AtRule, Comment, Declaration, Node, Root, Rule, Source

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class _Block:
    """Children of a ``{ ... }`` block, before they are attached to a parent."""

    def __init__(self, nodes: list[Node]):
        self.nodes = nodes


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Root/AtRule/Rule/Declaration/Comment nodes."""

    def __init__(self, file: str | None = None) -> None:
        super().__init__()
        self.file = file

    def _source(self, token: Token) -> Source:
        return Source(file=self.file, line=token.line, column=token.column)

    def start(self, items: list[Node]) -> Root:
        return Root(nodes=items, source=Source(file=self.file, line=1, column=1))

    def block(self, items: list[Node]) -> _Block:
        return _Block(list(items))

    def at_rule(self, items: list[Any]) -> AtRule:
        keyword = items[0]
        params = ""
        nodes: list[Node] | None = None
        for item in items[1:]:
            if isinstance(item, Token) and item.type == "AT_PARAMS":
                params = str(item).strip()
            elif isinstance(item, _Block):
                nodes = item.nodes
        return AtRule(
            name=str(keyword)[1:],
            params=params,
            nodes=nodes,
            source=self._source(keyword),
        )

    def rule(self, items: list[Any]) -> Rule:
        selector, block = items
        return Rule(
            selector=str(selector).strip(),
            nodes=block.nodes,
            source=self._source(selector),
        )

    def declaration(self, items: list[Token]) -> Declaration:
        token = items[0]
        prop, _, value = str(token).partition(":")
        return Declaration(prop=prop.strip(), value=value.strip(), source=self._source(token))

    def comment(self, items: list[Token]) -> Comment:
        token = items[0]
        return Comment(text=str(token)[2:-2].strip(), source=self._source(token))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_css(source: str, file: str | None = None) -> Root:
    """Parse CSS source text into a :class:`Root`.

    Every node's ``source.file`` is set to *file* so import rules know which
    stylesheet they live in.
    """
    try:
        tree = _parser().parse(source)
    except Exception as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column, file=file) from e
    return CssTransformer(file=file).transform(tree)
