import pytest

from drillkit.sorted_hash_table import SortedHashTable

KEYS = ["y", "j", "c", "b", "z", "n", "a", "m"]


@pytest.fixture
def table():
    t = SortedHashTable(1024)
    for key in KEYS:
        t.set(key, key)
    return t


def test_iteration_is_sorted(table):
    assert [key for key, _ in table] == sorted(KEYS)


def test_reverse_iteration(table):
    assert [key for key, _ in reversed(table)] == sorted(KEYS, reverse=True)


def test_str_sorted():
    t = SortedHashTable(4)
    t.set("b", "2")
    t.set("c", "3")
    t.set("a", "1")
    assert str(t) == "{'a': '1', 'b': '2', 'c': '3'}"
    assert t.format_reversed() == "{'c': '3', 'b': '2', 'a': '1'}"


def test_empty_formats():
    t = SortedHashTable(3)
    assert str(t) == "{}"
    assert t.format_reversed() == "{}"


def test_get_and_missing(table):
    assert table.get("m") == "m"
    assert table.get("q") is None
    assert table.get("") is None


def test_update_keeps_order_and_size(table):
    table.set("c", "changed")
    assert table.get("c") == "changed"
    assert len(table) == len(KEYS)
    assert [key for key, _ in table] == sorted(KEYS)
    assert dict(table)["c"] == "changed"


def test_collisions_in_single_bucket():
    t = SortedHashTable(1)
    for key in ["delta", "alpha", "charlie", "bravo"]:
        t.set(key, key.upper())
    assert list(t) == [
        ("alpha", "ALPHA"),
        ("bravo", "BRAVO"),
        ("charlie", "CHARLIE"),
        ("delta", "DELTA"),
    ]
    assert t.get("charlie") == "CHARLIE"


def test_contains(table):
    assert "a" in table
    assert "x" not in table
    assert "" not in table


def test_invalid_arguments():
    t = SortedHashTable(2)
    with pytest.raises(ValueError):
        t.set("", "v")
    with pytest.raises(ValueError):
        t.set("k", None)
    with pytest.raises(ValueError):
        SortedHashTable(0)


def test_clear(table):
    table.clear()
    assert len(table) == 0
    assert list(table) == []
    assert table.get("a") is None