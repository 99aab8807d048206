"""Integer stacks with postfix-style arithmetic: fixed array, growable array and linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import islice

from dsakit.linkedlist import LinkedList


class StackError(RuntimeError):
    """Raised for stack overflow, underflow, bad indices and bad arithmetic."""


def _trunc_div(b: int, a: int) -> int:
    quotient = abs(b) // abs(a)
    return -quotient if (b < 0) != (a < 0) else quotient


def _print_values(values: Iterable[int]) -> None:
    for value in values:
        print(value)


def _check_index(size: int, idx: int) -> None:
    if idx < 0 or size - idx < 1:
        raise StackError("Index out of range")


def _require_two(size: int) -> None:
    if size < 2:
        raise StackError("Not Enough Arguments")


def _combine(
    size: int,
    pop: Callable[[], int],
    push: Callable[[int], None],
    op: Callable[[int, int], int],
) -> int:
    _require_two(size)
    a = pop()
    b = pop()
    result = op(b, a)
    push(result)
    return result


def _add(b: int, a: int) -> int:
    return b + a


def _sub(b: int, a: int) -> int:
    return b - a


def _mul(b: int, a: int) -> int:
    return b * a


def _array_divide(items: list[int], pop: Callable[[], int], push: Callable[[int], None]) -> int:
    _require_two(len(items))
    if items[-1] == 0:
        raise StackError("Divide by Zero Error")
    a = pop()
    b = pop()
    result = _trunc_div(b, a)
    if result <= 0 and b != 0:
        result -= 1
    push(result)
    return result


class ArrayStack:
    """A stack holding at most ``MAX_SIZE`` values."""

    MAX_SIZE = 1024

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) == self.MAX_SIZE:
            raise StackError("Stack Full")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackError("Empty Stack")
        return self._items.pop()

    def get_element_from_top(self, idx: int) -> int:
        _check_index(len(self._items), idx)
        return self._items[-1 - idx]

    def get_element_from_bottom(self, idx: int) -> int:
        _check_index(len(self._items), idx)
        return self._items[idx]

    def print_stack(self, top: bool) -> None:
        """Print one value per line, starting from the top if ``top`` is true."""
        _print_values(reversed(self._items) if top else self._items)

    def add(self) -> int:
        """Replace the top two values with their sum."""
        return _combine(len(self), self.pop, self.push, _add)

    def subtract(self) -> int:
        """Replace the top two values with second minus top."""
        return _combine(len(self), self.pop, self.push, _sub)

    def multiply(self) -> int:
        """Replace the top two values with their product."""
        return _combine(len(self), self.pop, self.push, _mul)

    def divide(self) -> int:
        """Replace the top two values with second divided by top.

        The quotient truncates toward zero and is then lowered by one
        whenever it is not positive and the dividend is non-zero.
        """
        return _array_divide(self._items, self.pop, self.push)

    def __len__(self) -> int:
        return len(self._items)


class DynamicStack:
    """A stack whose capacity doubles when full and halves when half empty."""

    INITIAL_CAPACITY = 1024

    def __init__(self) -> None:
        self._items: list[int] = []
        self._capacity = self.INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: int) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackError("Empty Stack")
        value = self._items.pop()
        if len(self._items) <= self._capacity // 2 and self._capacity >= 2 * self.INITIAL_CAPACITY:
            self._capacity //= 2
        return value

    def get_element_from_top(self, idx: int) -> int:
        _check_index(len(self._items), idx)
        return self._items[-1 - idx]

    def get_element_from_bottom(self, idx: int) -> int:
        _check_index(len(self._items), idx)
        return self._items[idx]

    def add(self) -> int:
        """Replace the top two values with their sum."""
        return _combine(len(self), self.pop, self.push, _add)

    def subtract(self) -> int:
        """Replace the top two values with second minus top."""
        return _combine(len(self), self.pop, self.push, _sub)

    def multiply(self) -> int:
        """Replace the top two values with their product."""
        return _combine(len(self), self.pop, self.push, _mul)

    def divide(self) -> int:
        """Replace the top two values with second divided by top, rounded as in ArrayStack."""
        return _array_divide(self._items, self.pop, self.push)

    def __len__(self) -> int:
        return len(self._items)


class ListStack:
    """A stack stored in a sentinel-bounded doubly linked list."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, value: int) -> None:
        self._list.insert(value)

    def pop(self) -> int:
        if len(self._list) == 0:
            raise StackError("Empty Stack")
        return self._list.delete_tail()

    def get_element_from_top(self, idx: int) -> int:
        _check_index(len(self._list), idx)
        return next(islice(reversed(self._list), idx, None))

    def get_element_from_bottom(self, idx: int) -> int:
        _check_index(len(self._list), idx)
        return next(islice(iter(self._list), idx, None))

    def print_stack(self, top: bool) -> None:
        """Print one value per line, starting from the top if ``top`` is true."""
        _print_values(reversed(self._list) if top else iter(self._list))

    def add(self) -> int:
        """Replace the top two values with their sum."""
        return _combine(len(self), self._list.delete_tail, self._list.insert, _add)

    def subtract(self) -> int:
        """Replace the top two values with second minus top."""
        return _combine(len(self), self._list.delete_tail, self._list.insert, _sub)

    def multiply(self) -> int:
        """Replace the top two values with their product."""
        return _combine(len(self), self._list.delete_tail, self._list.insert, _mul)

    def divide(self) -> int:
        """Replace the top two values with second divided by top.

        Both operands are removed before the zero check, so a division by
        zero leaves the stack without them. The truncated quotient is lowered
        by one whenever it is not positive.
        """
        _require_two(len(self._list))
        a = self._list.delete_tail()
        b = self._list.delete_tail()
        if a == 0:
            raise StackError("Divide by Zero Error")
        result = _trunc_div(b, a)
        if result <= 0:
            result -= 1
        self._list.insert(result)
        return result

    def __len__(self) -> int:
        return len(self._list)