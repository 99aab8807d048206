"""Arbitrary-precision signed integers with floor division semantics."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

_DIGITS = frozenset("0123456789")

IntLike = Union["UnlimitedInt", int]


def _parse(text: str) -> int:
    body = text.strip()
    negative = body.startswith("-")
    digits = body[1:] if negative else body
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"not a decimal integer: {text!r}")
    value = int(digits)
    return -value if negative else value


@total_ordering
class UnlimitedInt:
    """A signed integer of any size.

    It can be built from a decimal string (an optional leading ``-``
    followed by digits; leading zeros are allowed), from an ``int`` or from
    another ``UnlimitedInt``. Division rounds toward negative infinity and
    the remainder takes the sign of the divisor.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str | int | UnlimitedInt = 0) -> None:
        if isinstance(value, UnlimitedInt):
            self._value = value._value
        elif isinstance(value, bool):
            raise TypeError("booleans are not integers here")
        elif isinstance(value, int):
            self._value = value
        elif isinstance(value, str):
            self._value = _parse(value)
        else:
            raise TypeError(f"cannot build an UnlimitedInt from {type(value).__name__}")

    @staticmethod
    def _coerce(value: IntLike) -> int:
        if isinstance(value, UnlimitedInt):
            return value._value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise TypeError(f"expected an integer, got {type(value).__name__}")

    @property
    def sign(self) -> int:
        """-1 for negative numbers, 1 otherwise."""
        return -1 if self._value < 0 else 1

    @property
    def digits(self) -> tuple[int, ...]:
        """Decimal digits of the magnitude, most significant first."""
        return tuple(int(ch) for ch in str(abs(self._value)))

    def is_zero(self) -> bool:
        return self._value == 0

    @staticmethod
    def add(i1: IntLike, i2: IntLike) -> UnlimitedInt:
        return UnlimitedInt(UnlimitedInt._coerce(i1) + UnlimitedInt._coerce(i2))

    @staticmethod
    def sub(i1: IntLike, i2: IntLike) -> UnlimitedInt:
        return UnlimitedInt(UnlimitedInt._coerce(i1) - UnlimitedInt._coerce(i2))

    @staticmethod
    def mul(i1: IntLike, i2: IntLike) -> UnlimitedInt:
        return UnlimitedInt(UnlimitedInt._coerce(i1) * UnlimitedInt._coerce(i2))

    @staticmethod
    def div(i1: IntLike, i2: IntLike) -> UnlimitedInt:
        """Quotient rounded toward negative infinity."""
        divisor = UnlimitedInt._coerce(i2)
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        return UnlimitedInt(UnlimitedInt._coerce(i1) // divisor)

    @staticmethod
    def mod(i1: IntLike, i2: IntLike) -> UnlimitedInt:
        """Remainder ``i1 - i2 * div(i1, i2)``."""
        quotient = UnlimitedInt.div(i1, i2)
        return UnlimitedInt.sub(i1, UnlimitedInt.mul(i2, quotient))

    def __add__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.add(self, other)

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.sub(self, other)

    def __rsub__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.sub(other, self)

    def __mul__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.mul(self, other)

    __rmul__ = __mul__

    def __floordiv__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.div(self, other)

    def __rfloordiv__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.div(other, self)

    def __mod__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.mod(self, other)

    def __rmod__(self, other: IntLike) -> UnlimitedInt:
        return UnlimitedInt.mod(other, self)

    def __neg__(self) -> UnlimitedInt:
        return UnlimitedInt(-self._value)

    def __abs__(self) -> UnlimitedInt:
        return UnlimitedInt(abs(self._value))

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnlimitedInt):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: IntLike) -> bool:
        try:
            return self._value < UnlimitedInt._coerce(other)
        except TypeError:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __len__(self) -> int:
        """Number of decimal digits in the magnitude."""
        return len(str(abs(self._value)))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"UnlimitedInt({str(self)!r})"