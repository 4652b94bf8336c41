"""Abstract syntax tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class NodeOp(IntEnum):
    """Operations an AST node can stand for."""

    ADD = 0
    SUB = 1
    MUL = 2
    DIV = 3
    INTLIT = 4
    ASSIGN = 5
    IDENTIFIER = 6
    LVIDENTIFIER = 7


@dataclass
class ASTNode:
    """A tree node; value is an integer literal or a symbol slot."""

    op: NodeOp
    left: ASTNode | None = None
    right: ASTNode | None = None
    value: int = 0


def make_node(op: NodeOp, left: ASTNode | None, right: ASTNode | None, value: int) -> ASTNode:
    """Build a node with up to two children."""
    return ASTNode(op, left, right, value)


def make_leaf(op: NodeOp, value: int) -> ASTNode:
    """Build a node with no children."""
    return ASTNode(op, None, None, value)


def make_unary(op: NodeOp, left: ASTNode | None, value: int) -> ASTNode:
    """Build a node with a single (left) child."""
    return ASTNode(op, left, None, value)