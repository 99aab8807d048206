import pytest

from dsakit.rational import UnlimitedRational
from dsakit.symtable import SymbolTable


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.key] + _in_order(node.right)


def _filled(keys):
    table = SymbolTable()
    for pos, key in enumerate(keys):
        table.insert(key, UnlimitedRational(pos))
    return table


KEYS = ["m", "d", "t", "b", "f", "p", "x", "e"]


def test_empty_table():
    table = SymbolTable()
    assert len(table) == 0
    assert table.root is None
    assert "a" not in table


def test_insert_and_search():
    table = _filled(KEYS)
    for pos, key in enumerate(KEYS):
        assert table.search(key) == UnlimitedRational(pos)
    assert len(table) == len(KEYS)


def test_tree_is_ordered():
    table = _filled(KEYS)
    assert _in_order(table.root) == sorted(KEYS)


def test_search_missing_raises_key_error():
    table = _filled(KEYS)
    with pytest.raises(KeyError):
        table.search("zz")


def test_contains():
    table = _filled(KEYS)
    assert "f" in table
    assert "q" not in table
    assert 5 not in table


@pytest.mark.parametrize("key", ["e", "b", "f", "d", "m", "t"])
def test_remove_keeps_the_rest(key):
    table = _filled(KEYS)
    table.remove(key)
    assert key not in table
    assert len(table) == len(KEYS) - 1
    remaining = [k for k in KEYS if k != key]
    assert _in_order(table.root) == sorted(remaining)
    for k in remaining:
        assert table.search(k) == UnlimitedRational(KEYS.index(k))


def test_remove_missing_raises_key_error():
    table = _filled(KEYS)
    with pytest.raises(KeyError):
        table.remove("zz")
    assert len(table) == len(KEYS)


def test_remove_from_empty_raises_key_error():
    with pytest.raises(KeyError):
        SymbolTable().remove("a")


def test_duplicate_key_adds_entry_and_earliest_wins():
    table = SymbolTable()
    first = UnlimitedRational(1)
    second = UnlimitedRational(2)
    table.insert("x", first)
    table.insert("x", second)
    assert len(table) == 2
    assert table.search("x") == first
    table.remove("x")
    assert table.search("x") == second