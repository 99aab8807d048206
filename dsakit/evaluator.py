"""Parse assignment statements into expression trees and evaluate them."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Callable, Iterable

from dsakit.exprtree import ASSIGN, OPERATOR_TYPES, ExprTreeNode, NodeType
from dsakit.rational import UnlimitedRational
from dsakit.symtable import SymbolTable

_LEXEME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|:=|[()+\-*/]|[0-9]+")

_BINARY: dict[NodeType, Callable[[UnlimitedRational, UnlimitedRational], UnlimitedRational]] = {
    NodeType.ADD: UnlimitedRational.add,
    NodeType.SUB: UnlimitedRational.sub,
    NodeType.MUL: UnlimitedRational.mul,
    NodeType.DIV: UnlimitedRational.div,
}

_NOT_OPERANDS = frozenset({"(", ")", ASSIGN}) | OPERATOR_TYPES.keys()


def tokenize(line: str) -> list[str]:
    """Split a statement into names, integers, ``:=``, parentheses and operators."""
    return _LEXEME_PATTERN.findall(line)


def _take(queue: deque[str]) -> str:
    if not queue:
        raise ValueError("unexpected end of expression")
    return queue.popleft()


def _parse(queue: deque[str]) -> ExprTreeNode:
    item = _take(queue)
    if item == "(":
        left = _parse(queue)
        symbol = _take(queue)
        kind = OPERATOR_TYPES.get(symbol)
        if kind is None:
            raise ValueError(f"expected an operator, got {symbol!r}")
        right = _parse(queue)
        closing = _take(queue)
        if closing != ")":
            raise ValueError(f"expected ')', got {closing!r}")
        return ExprTreeNode(kind, left=left, right=right)
    if item in _NOT_OPERANDS:
        raise ValueError(f"expected an operand, got {item!r}")
    return ExprTreeNode.from_token(item)


def build_tree(tokens: Iterable[str]) -> ExprTreeNode:
    """Build a tree from a single operand or a fully parenthesised expression."""
    queue = deque(tokens)
    node = _parse(queue)
    if queue:
        raise ValueError(f"unexpected token {queue[0]!r} after expression")
    return node


def evaluate(node: ExprTreeNode, symtable: SymbolTable) -> UnlimitedRational | None:
    """Evaluate ``node``, recording each subtree's value on its root.

    Variables are looked up in ``symtable``. Nodes that are neither
    operators, values nor variables evaluate to None.
    """
    operation = _BINARY.get(node.kind)
    if operation is not None:
        if node.left is None or node.right is None:
            raise ValueError(f"{node.kind.value} node is missing an operand")
        left = evaluate(node.left, symtable)
        right = evaluate(node.right, symtable)
        result = operation(left, right)
    elif node.kind is NodeType.VAL:
        result = node.value
    elif node.kind is NodeType.VAR:
        result = symtable.search(node.name)
    else:
        return None
    node.evaluated_value = result
    return result


class Evaluator:
    """Keeps the parsed statements and the variables they assign."""

    def __init__(self) -> None:
        self.expr_trees: list[ExprTreeNode] = []
        self.symtable = SymbolTable()

    def parse(self, tokens: Iterable[str]) -> ExprTreeNode:
        """Parse ``name := expression`` and store its tree."""
        items = list(tokens)
        if len(items) < 3 or items[1] != ASSIGN:
            raise ValueError("expected a statement of the form 'name := expression'")
        target = ExprTreeNode.from_token(items[0])
        if target.kind is not NodeType.VAR:
            raise ValueError(f"cannot assign to {items[0]!r}")
        root = ExprTreeNode(NodeType.ASS, name=ASSIGN, left=target, right=build_tree(items[2:]))
        self.expr_trees.append(root)
        return root

    def eval(self) -> UnlimitedRational:
        """Evaluate the latest statement and bind its variable."""
        if not self.expr_trees:
            raise IndexError("no statement has been parsed")
        root = self.expr_trees[-1]
        value = evaluate(root.right, self.symtable)
        root.evaluated_value = value
        self.symtable.insert(root.left.name, value)
        return value