"""Bank account stores keyed by account id, built on hand-rolled hash tables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class Account:
    """An account id with its current balance."""

    id: str
    balance: int


def _polynomial_hash(account_id: str, coefficients: Sequence[int], modulus: int) -> int:
    total = sum(
        ord(ch) * coefficients[pos % len(coefficients)]
        for pos, ch in enumerate(account_id)
    )
    return total % modulus


class AccountStore(ABC):
    """Common interface of the account stores.

    Besides the accounts themselves, a store keeps a flat list of balances
    used to answer top-k queries. A transaction adjusts every entry in that
    list equal to the old balance of the account, and a deletion removes one
    entry equal to the deleted balance.
    """

    TABLE_SIZE: int = 200003
    COEFFICIENTS: tuple[int, ...] = (
        1, 41, 1681, 68921, 25719, 54464, 32991, 152613, 57040, 138607,
    )

    def __init__(self) -> None:
        self._balances: list[int] = []
        self._size = 0

    @abstractmethod
    def create_account(self, account_id: str, count: int) -> None:
        """Open an account holding ``count``."""

    @abstractmethod
    def get_balance(self, account_id: str) -> int:
        """Return the balance of the account, or -1 if it does not exist."""

    @abstractmethod
    def add_transaction(self, account_id: str, count: int) -> None:
        """Add ``count`` to the account, opening it if it does not exist."""

    @abstractmethod
    def does_exist(self, account_id: str) -> bool:
        """Return whether the account exists."""

    @abstractmethod
    def delete_account(self, account_id: str) -> bool:
        """Delete the account; return whether it existed."""

    @abstractmethod
    def hash(self, account_id: str) -> int:
        """Return the table slot for ``account_id``."""

    def get_top_k(self, k: int) -> list[int]:
        """Return the ``k`` largest balances, largest first."""
        if k <= 0:
            return []
        return sorted(self._balances, reverse=True)[:k]

    def database_size(self) -> int:
        """Return the number of accounts."""
        return self._size

    def _record_new(self, balance: int) -> None:
        self._size += 1
        self._balances.append(balance)

    def _record_change(self, old_balance: int, count: int) -> None:
        self._balances = [
            value + count if value == old_balance else value for value in self._balances
        ]

    def _record_removal(self, balance: int) -> None:
        self._size -= 1
        try:
            self._balances.remove(balance)
        except ValueError:
            pass


class Chaining(AccountStore):
    """Accounts stored in buckets of a separately chained hash table."""

    def __init__(self) -> None:
        super().__init__()
        self._buckets: list[list[Account]] = [[] for _ in range(self.TABLE_SIZE)]

    def hash(self, account_id: str) -> int:
        return _polynomial_hash(account_id, self.COEFFICIENTS, self.TABLE_SIZE)

    def _find(self, account_id: str) -> Account | None:
        return next(
            (acc for acc in self._buckets[self.hash(account_id)] if acc.id == account_id),
            None,
        )

    def create_account(self, account_id: str, count: int) -> None:
        self._buckets[self.hash(account_id)].append(Account(account_id, count))
        self._record_new(count)

    def get_balance(self, account_id: str) -> int:
        account = self._find(account_id)
        return -1 if account is None else account.balance

    def add_transaction(self, account_id: str, count: int) -> None:
        account = self._find(account_id)
        if account is None:
            self.create_account(account_id, count)
            return
        old = account.balance
        account.balance += count
        self._record_change(old, count)

    def does_exist(self, account_id: str) -> bool:
        return self._find(account_id) is not None

    def delete_account(self, account_id: str) -> bool:
        bucket = self._buckets[self.hash(account_id)]
        for pos, account in enumerate(bucket):
            if account.id == account_id:
                del bucket[pos]
                self._record_removal(account.balance)
                return True
        return False


_EMPTY = None
_TOMBSTONE = object()


class LinearProbing(AccountStore):
    """Accounts stored in an open-addressed table probed one slot at a time.

    Deleted slots become tombstones: lookups walk past them and new
    accounts may reuse them.
    """

    def __init__(self) -> None:
        super().__init__()
        self._slots: list[object] = [_EMPTY] * self.TABLE_SIZE

    def hash(self, account_id: str) -> int:
        return _polynomial_hash(account_id, self.COEFFICIENTS, self.TABLE_SIZE)

    def _probe(self, start: int) -> Iterator[int]:
        """Yield the slots visited from ``start``, each at most once."""
        for step in range(self.TABLE_SIZE):
            yield (start + step) % self.TABLE_SIZE

    def _locate(self, account_id: str) -> int | None:
        for slot in self._probe(self.hash(account_id)):
            entry = self._slots[slot]
            if entry is _EMPTY:
                return None
            if isinstance(entry, Account) and entry.id == account_id:
                return slot
        return None

    def create_account(self, account_id: str, count: int) -> None:
        for slot in self._probe(self.hash(account_id)):
            entry = self._slots[slot]
            if entry is _EMPTY or entry is _TOMBSTONE:
                self._slots[slot] = Account(account_id, count)
                self._record_new(count)
                return
        raise OverflowError("account table is full")

    def get_balance(self, account_id: str) -> int:
        slot = self._locate(account_id)
        if slot is None:
            return -1
        account = self._slots[slot]
        assert isinstance(account, Account)
        return account.balance

    def add_transaction(self, account_id: str, count: int) -> None:
        slot = self._locate(account_id)
        if slot is None:
            self.create_account(account_id, count)
            return
        account = self._slots[slot]
        assert isinstance(account, Account)
        old = account.balance
        account.balance += count
        self._record_change(old, count)

    def does_exist(self, account_id: str) -> bool:
        return self._locate(account_id) is not None

    def delete_account(self, account_id: str) -> bool:
        slot = self._locate(account_id)
        if slot is None:
            return False
        account = self._slots[slot]
        assert isinstance(account, Account)
        self._slots[slot] = _TOMBSTONE
        self._record_removal(account.balance)
        return True