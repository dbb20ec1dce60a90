import pytest

from pipex.linkedlist import LinkedList


def test_items_keep_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last() == "x"
    lst.push_back("y")
    assert lst.last() == "y"


def test_last_returns_tail():
    assert LinkedList(["p", "q", "r"]).last() == "r"


def test_clear_deletes_each_in_order():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(seen.append)
    assert seen == ["a", "b", "c"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert len(lst) == 0


def test_for_each_visits_all():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    original = LinkedList(["ab", "cde"])
    mapped = original.map(len)
    assert list(mapped) == [2, 3]
    assert list(original) == ["ab", "cde"]


def test_map_failure_deletes_produced_items():
    deleted = []

    def func(value):
        if value == 3:
            raise ValueError("bad value")
        return value * 10

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_len_matches_iteration():
    lst = LinkedList(range(7))
    lst.push_front(-1)
    assert len(lst) == len(list(lst))