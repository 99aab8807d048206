"""A doubly linked list bounded by sentinel nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Node:
    """A list node; sentinel nodes carry no value."""

    __slots__ = ("value", "next", "prev", "_sentinel")

    def __init__(
        self,
        value: int | None = None,
        next: Node | None = None,
        prev: Node | None = None,
        *,
        sentinel: bool = False,
    ) -> None:
        self.value = value
        self.next = next
        self.prev = prev
        self._sentinel = sentinel

    def is_sentinel_node(self) -> bool:
        return self._sentinel

    def __repr__(self) -> str:
        return "Node(<sentinel>)" if self._sentinel else f"Node({self.value!r})"


class LinkedList:
    """Doubly linked list: head <-> values... <-> tail, with head and tail linked in a ring."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head = Node(sentinel=True)
        self.tail = Node(sentinel=True)
        self.head.next = self.tail
        self.tail.prev = self.head
        self.head.prev = self.tail
        self.tail.next = self.head
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Append ``value`` at the tail."""
        last = self.tail.prev
        node = Node(value, self.tail, last)
        last.next = node
        self.tail.prev = node
        self._size += 1

    def delete_tail(self) -> int:
        """Remove the last value and return it."""
        if self._size == 0:
            raise IndexError("delete_tail from empty list")
        node = self.tail.prev
        node.prev.next = self.tail
        self.tail.prev = node.prev
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self.head.next
        while not node.is_sentinel_node():
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self.tail.prev
        while not node.is_sentinel_node():
            yield node.value
            node = node.prev