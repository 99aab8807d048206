"""A symbol table stored in an unbalanced binary search tree keyed by name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class SymEntry:
    """One binding in the tree."""

    key: str
    value: Any
    left: SymEntry | None = None
    right: SymEntry | None = None


def _pop_min(node: SymEntry) -> tuple[SymEntry | None, SymEntry]:
    if node.left is None:
        return node.right, node
    node.left, smallest = _pop_min(node.left)
    return node, smallest


def _remove(node: SymEntry | None, key: str) -> SymEntry | None:
    if node is None:
        raise KeyError(key)
    if key < node.key:
        node.left = _remove(node.left, key)
        return node
    if key > node.key:
        node.right = _remove(node.right, key)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    node.right, successor = _pop_min(node.right)
    node.key, node.value = successor.key, successor.value
    return node


class SymbolTable:
    """Maps names to values.

    Inserting a name that is already present adds another entry rather than
    replacing the old one; lookups and removals find the earliest entry.
    """

    def __init__(self) -> None:
        self._root: SymEntry | None = None
        self._size = 0

    @property
    def root(self) -> SymEntry | None:
        return self._root

    def insert(self, key: str, value: Any) -> None:
        entry = SymEntry(key, value)
        self._size += 1
        if self._root is None:
            self._root = entry
            return
        node = self._root
        while True:
            if key > node.key:
                if node.right is None:
                    node.right = entry
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = entry
                    return
                node = node.left

    def remove(self, key: str) -> None:
        """Remove the entry for ``key``; raise KeyError if there is none."""
        self._root = _remove(self._root, key)
        self._size -= 1

    def search(self, key: str) -> Any:
        """Return the value bound to ``key``; raise KeyError if there is none."""
        node = self._root
        while node is not None:
            if node.key == key:
                return node.value
            node = node.right if key > node.key else node.left
        raise KeyError(key)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True