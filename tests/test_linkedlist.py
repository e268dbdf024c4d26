import pytest

from fdfview.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b"]


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert lst.last() is node
    assert list(lst) == ["x", "y"]


def test_last_returns_final_node():
    lst = LinkedList([10, 20, 30])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 30
    assert tail.next is None


def test_len_counts_none_values():
    lst = LinkedList([None, 1, None])
    assert len(lst) == 3


def test_clear_deletes_in_reverse_and_skips_none():
    released = []
    lst = LinkedList(["a", None, "c"])
    lst.clear(released.append)
    assert released == ["c", "a"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_skips_none():
    seen = []
    LinkedList([1, None, 3]).iterate(seen.append)
    assert seen == [1, 3]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [10, 20, 30]
    assert list(source) == [1, 2, 3]


def test_map_of_empty_list_is_empty():
    mapped = LinkedList().map(str, lambda v: None)
    assert len(mapped) == 0


def test_map_failure_releases_produced_values():
    released = []

    def func(value):
        return None if value == 3 else f"v{value}"

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, released.append)
    assert released == ["v2", "v1"]


def test_push_back_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(5)
    assert list(lst) == [5]
    assert lst.last().content == 5