"""Resource Store — ordering, lookup and removal semantics.

Tests cover:
    - append keeps insertion order; all() returns a snapshot
    - find / find_index return the first match, None / -1 on a miss
    - filter keeps insertion order and returns [] when nothing matches
    - remove_at removes exactly one element and rejects bad indexes
    - concurrent appends from threads are all kept
"""

import threading

import pytest

from typed_api.core.resource_store import ResourceStore


def _store(*values):
    return ResourceStore("numbers", values)


def test_new_store_is_empty():
    store = ResourceStore("things")
    assert len(store) == 0
    assert store.all() == []


def test_append_preserves_insertion_order():
    store = _store()
    for value in (3, 1, 2):
        store.append(value)
    assert store.all() == [3, 1, 2]


def test_all_returns_snapshot_not_live_list():
    store = _store(1, 2)
    snapshot = store.all()
    store.append(3)
    assert snapshot == [1, 2]


def test_find_returns_first_match():
    store = _store({"id": "a", "n": 1}, {"id": "b", "n": 1})
    assert store.find(lambda r: r["n"] == 1)["id"] == "a"


def test_find_returns_none_on_miss():
    assert _store(1, 2).find(lambda r: r == 9) is None


def test_find_index_returns_position_or_minus_one():
    store = _store("a", "b", "c")
    assert store.find_index(lambda r: r == "b") == 1
    assert store.find_index(lambda r: r == "z") == -1


def test_filter_keeps_order_and_returns_empty_list_on_miss():
    store = _store(5, 2, 8, 1)
    assert store.filter(lambda r: r > 1) == [5, 2, 8]
    assert store.filter(lambda r: r > 100) == []


def test_remove_at_removes_single_element():
    store = _store("a", "b", "c")
    assert store.remove_at(1) == "b"
    assert store.all() == ["a", "c"]


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_at_rejects_out_of_range_index(index):
    store = _store("a", "b", "c")
    with pytest.raises(IndexError):
        store.remove_at(index)
    assert store.all() == ["a", "b", "c"]


def test_locked_allows_nested_operations():
    store = _store("a", "b")
    with store.locked():
        index = store.find_index(lambda r: r == "a")
        store.remove_at(index)
    assert store.all() == ["b"]


def test_concurrent_appends_are_all_kept():
    store = ResourceStore("numbers")

    def worker(offset):
        for i in range(200):
            store.append(offset + i)

    threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1600
    assert len(set(store.all())) == 1600
