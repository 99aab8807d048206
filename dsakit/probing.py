"""Account stores on open-addressed tables probed by quadratic and cubic steps."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.accounts import Account, AccountStore, _polynomial_hash

_EMPTY = None
_TOMBSTONE = object()


class QuadraticProbing(AccountStore):
    """Accounts in an open-addressed table probed at ``h + k**2``.

    Deleted slots become tombstones: lookups walk past them and new
    accounts may reuse them.
    """

    TABLE_SIZE = 200003
    COEFFICIENTS = (1, 41, 1681, 68921, 25719, 54464, 32991, 152613, 57040, 138607)

    def __init__(self) -> None:
        super().__init__()
        self._slots: list[object] = [_EMPTY] * self.TABLE_SIZE

    @staticmethod
    def _offset(step: int) -> int:
        return step * step

    def hash(self, account_id: str) -> int:
        return _polynomial_hash(account_id, self.COEFFICIENTS, self.TABLE_SIZE)

    def _probe(self, start: int) -> Iterator[int]:
        """Yield the probe sequence from ``start``, bounded by the table size."""
        for step in range(self.TABLE_SIZE):
            yield (start + self._offset(step)) % self.TABLE_SIZE

    def _locate(self, account_id: str) -> Account | None:
        for slot in self._probe(self.hash(account_id)):
            entry = self._slots[slot]
            if entry is _EMPTY:
                return None
            if isinstance(entry, Account) and entry.id == account_id:
                return entry
        return None

    def _locate_slot(self, account_id: str) -> int | None:
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
        raise OverflowError("no free slot on the probe sequence")

    def get_balance(self, account_id: str) -> int:
        account = self._locate(account_id)
        return -1 if account is None else account.balance

    def add_transaction(self, account_id: str, count: int) -> None:
        account = self._locate(account_id)
        if account is None:
            self.create_account(account_id, count)
            return
        old = account.balance
        account.balance += count
        self._record_change(old, count)

    def does_exist(self, account_id: str) -> bool:
        return self._locate(account_id) is not None

    def delete_account(self, account_id: str) -> bool:
        slot = self._locate_slot(account_id)
        if slot is None:
            return False
        account = self._slots[slot]
        assert isinstance(account, Account)
        self._slots[slot] = _TOMBSTONE
        self._record_removal(account.balance)
        return True


class CubicProbing(QuadraticProbing):
    """Accounts in an open-addressed table probed at ``h + k**3``."""

    TABLE_SIZE = 300007
    COEFFICIENTS = (1, 41, 1681, 68921, 125698, 53499, 93410, 229726, 118549, 60397)

    @staticmethod
    def _offset(step: int) -> int:
        return step * step * step

    def hash(self, account_id: str) -> int:
        return _polynomial_hash(account_id, self.COEFFICIENTS, self.TABLE_SIZE)

    def create_account(self, account_id: str, count: int) -> None:
        super().create_account(account_id, count)

    def get_balance(self, account_id: str) -> int:
        return super().get_balance(account_id)

    def add_transaction(self, account_id: str, count: int) -> None:
        super().add_transaction(account_id, count)

    def does_exist(self, account_id: str) -> bool:
        return super().does_exist(account_id)

    def delete_account(self, account_id: str) -> bool:
        return super().delete_account(account_id)


class Comp(CubicProbing):
    """The competitive store: a cubic-probing table with the same layout."""