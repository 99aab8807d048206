"""Nodes of parsed arithmetic expression trees."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from dsakit.rational import UnlimitedRational
from dsakit.unlimitedint import UnlimitedInt

_INTEGER = re.compile(r"-?[0-9]+")


class NodeType(Enum):
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    VAL = "VAL"
    VAR = "VAR"
    ASS = "ASS"


OPERATOR_TYPES: dict[str, NodeType] = {
    "+": NodeType.ADD,
    "-": NodeType.SUB,
    "*": NodeType.MUL,
    "/": NodeType.DIV,
}

ASSIGN = ":="


def is_integer_token(token: str) -> bool:
    """Whether ``token`` is digits with an optional leading minus sign."""
    return _INTEGER.fullmatch(token) is not None


@dataclass(eq=False)
class ExprTreeNode:
    """A node: an operator with two children, a literal value or a variable name."""

    kind: NodeType
    value: UnlimitedRational | None = None
    name: str = ""
    left: ExprTreeNode | None = None
    right: ExprTreeNode | None = None
    evaluated_value: UnlimitedRational | None = None

    @staticmethod
    def from_token(token: str) -> ExprTreeNode:
        """Build a childless node for a single token."""
        kind = OPERATOR_TYPES.get(token)
        if kind is not None:
            return ExprTreeNode(kind)
        if is_integer_token(token):
            return ExprTreeNode(NodeType.VAL, value=UnlimitedRational(UnlimitedInt(token), 1))
        if token == ASSIGN:
            return ExprTreeNode(NodeType.ASS, name=token)
        return ExprTreeNode(NodeType.VAR, name=token)