"""Depth-first traversal of a syntax tree with skip/stop control."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from stylegraph.css.nodes import Container, Node


class WalkAction(Enum):
    """What the walker should do after visiting a node."""

    CONTINUE = "continue"
    SKIP = "skip"  # do not descend into this node
    STOP = "stop"  # end the whole walk


Visitor = Callable[[Node], "WalkAction | None"]


def walk(node: Container, visit: Visitor) -> WalkAction:
    """Visit every descendant of *node* in document order.

    Children are snapshotted before visiting, so the visitor may detach or
    move the node it is given.
    """
    for child in list(node.nodes or []):
        action = visit(child) or WalkAction.CONTINUE
        if action is WalkAction.STOP:
            return WalkAction.STOP
        if action is WalkAction.SKIP:
            continue
        if isinstance(child, Container) and child.nodes:
            if walk(child, visit) is WalkAction.STOP:
                return WalkAction.STOP
    return WalkAction.CONTINUE
