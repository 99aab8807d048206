"""Exact rationals built from arbitrary-precision integers."""

from __future__ import annotations

from dsakit.unlimitedint import IntLike, UnlimitedInt


def gcd(p: IntLike, q: IntLike) -> UnlimitedInt:
    """Euclid's algorithm on floor remainders; ``q`` must not be zero."""
    a = UnlimitedInt(p)
    b = UnlimitedInt(q)
    while True:
        a, b = b, UnlimitedInt.mod(a, b)
        if b.is_zero():
            return a


class UnlimitedRational:
    """A fraction ``p/q`` kept in lowest terms.

    The numerator and denominator are both divided by the gcd of their
    magnitudes; their signs are left as given, so a negative denominator
    stays negative.
    """

    __slots__ = ("_p", "_q")

    def __init__(self, num: IntLike = 1, den: IntLike = 1) -> None:
        p = UnlimitedInt(num)
        q = UnlimitedInt(den)
        if q.is_zero():
            raise ZeroDivisionError("zero denominator")
        common = gcd(abs(p), abs(q))
        self._p = UnlimitedInt.div(p, common)
        self._q = UnlimitedInt.div(q, common)

    @property
    def p(self) -> UnlimitedInt:
        """The numerator."""
        return self._p

    @property
    def q(self) -> UnlimitedInt:
        """The denominator."""
        return self._q

    @staticmethod
    def add(r1: UnlimitedRational, r2: UnlimitedRational) -> UnlimitedRational:
        num = UnlimitedInt.add(UnlimitedInt.mul(r1.p, r2.q), UnlimitedInt.mul(r2.p, r1.q))
        return UnlimitedRational(num, UnlimitedInt.mul(r1.q, r2.q))

    @staticmethod
    def sub(r1: UnlimitedRational, r2: UnlimitedRational) -> UnlimitedRational:
        num = UnlimitedInt.sub(UnlimitedInt.mul(r1.p, r2.q), UnlimitedInt.mul(r2.p, r1.q))
        return UnlimitedRational(num, UnlimitedInt.mul(r1.q, r2.q))

    @staticmethod
    def mul(r1: UnlimitedRational, r2: UnlimitedRational) -> UnlimitedRational:
        return UnlimitedRational(UnlimitedInt.mul(r1.p, r2.p), UnlimitedInt.mul(r1.q, r2.q))

    @staticmethod
    def div(r1: UnlimitedRational, r2: UnlimitedRational) -> UnlimitedRational:
        return UnlimitedRational(UnlimitedInt.mul(r1.p, r2.q), UnlimitedInt.mul(r1.q, r2.p))

    def __add__(self, other: UnlimitedRational) -> UnlimitedRational:
        return UnlimitedRational.add(self, other)

    def __sub__(self, other: UnlimitedRational) -> UnlimitedRational:
        return UnlimitedRational.sub(self, other)

    def __mul__(self, other: UnlimitedRational) -> UnlimitedRational:
        return UnlimitedRational.mul(self, other)

    def __truediv__(self, other: UnlimitedRational) -> UnlimitedRational:
        return UnlimitedRational.div(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnlimitedRational):
            return NotImplemented
        return self._p == other._p and self._q == other._q

    def __hash__(self) -> int:
        return hash((int(self._p), int(self._q)))

    def __str__(self) -> str:
        return f"{self._p}/{self._q}"

    def __repr__(self) -> str:
        return f"UnlimitedRational({str(self)!r})"