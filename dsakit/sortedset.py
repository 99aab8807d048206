"""A sorted set of integers and a small command interpreter over numbered sets."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections.abc import Iterable, Iterator

_UNARY_OPS = frozenset({6, 9})


class SortedIntSet:
    """A set of integers kept in ascending order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> int:
        """Add ``value`` if it is absent; return the new size."""
        pos = bisect_left(self._items, value)
        if pos == len(self._items) or self._items[pos] != value:
            self._items.insert(pos, value)
        return len(self._items)

    def delete(self, value: int) -> int:
        """Remove ``value`` if it is present; return the new size."""
        pos = bisect_left(self._items, value)
        if pos < len(self._items) and self._items[pos] == value:
            del self._items[pos]
        return len(self._items)

    def belongs_to(self, value: int) -> bool:
        pos = bisect_left(self._items, value)
        return pos < len(self._items) and self._items[pos] == value

    __contains__ = belongs_to

    def union(self, other: SortedIntSet) -> int:
        for value in list(other):
            self.insert(value)
        return len(self._items)

    def intersection(self, other: SortedIntSet) -> int:
        self._items = [value for value in self._items if other.belongs_to(value)]
        return len(self._items)

    def difference(self, other: SortedIntSet) -> int:
        for value in list(other):
            self.delete(value)
        return len(self._items)

    def symmetric_difference(self, other: SortedIntSet) -> int:
        for value in list(other):
            if self.belongs_to(value):
                self.delete(value)
            else:
                self.insert(value)
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __str__(self) -> str:
        return ",".join(str(value) for value in self._items)

    def __repr__(self) -> str:
        return f"SortedIntSet([{self}])"


class SetSession:
    """Runs numbered set commands and produces one output line per command.

    Commands: 1 insert, 2 delete, 3 membership, 4 union, 5 intersection,
    6 size, 7 difference, 8 symmetric difference, 9 print.
    """

    def __init__(self) -> None:
        self.sets: list[SortedIntSet] = []

    def _exists(self, index: int) -> bool:
        return index < len(self.sets)

    def _ensure(self, index: int) -> None:
        if not self._exists(index):
            self.sets.append(SortedIntSet())

    def _get(self, index: int) -> SortedIntSet:
        if index < 0 or index >= len(self.sets):
            raise IndexError(f"no set with index {index}")
        return self.sets[index]

    def execute(self, op: int, b: int, c: int | None = None) -> str | None:
        """Run one command; return its output line, or None for an unknown op."""
        if op == 1:
            self._ensure(b)
            return str(self._get(b).insert(c))
        if op == 2:
            return str(self._get(b).delete(c)) if self._exists(b) else "-1"
        if op == 3:
            return str(int(self._get(b).belongs_to(c))) if self._exists(b) else "-1"
        if op == 6:
            self._ensure(b)
            return str(len(self._get(b)))
        if op == 9:
            return str(self._get(b)) if self._exists(b) else ""
        binary = {
            4: SortedIntSet.union,
            5: SortedIntSet.intersection,
            7: SortedIntSet.difference,
            8: SortedIntSet.symmetric_difference,
        }.get(op)
        if binary is None:
            return None
        self._ensure(b)
        self._ensure(c)
        return str(binary(self._get(b), self._get(c)))

    def run(self, tokens: Iterable[int | str]) -> Iterator[str]:
        """Consume a stream of integer tokens and yield output lines."""
        stream = iter(tokens)
        for token in stream:
            op = int(token)
            try:
                b = int(next(stream))
                c = None if op in _UNARY_OPS else int(next(stream))
            except StopIteration:
                return
            line = self.execute(op, b, c)
            if line is not None:
                yield line


def _read_ints(text: str) -> Iterator[int]:
    for word in text.split():
        try:
            yield int(word)
        except ValueError:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read set commands from standard input and print their results."
    )
    parser.parse_args(argv)
    session = SetSession()
    for line in session.run(_read_ints(sys.stdin.read())):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())