import pytest

from fractol.linked_list import LinkedList, Node


def test_built_from_items_keeps_order():
    items = [1, "two", 3.0]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_add_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.add_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head is node
    assert node.next.content == "b"


def test_add_back_appends_and_updates_last():
    lst = LinkedList()
    lst.add_back("x")
    node = lst.add_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() is node
    assert lst.last().next is None


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.add_front("only")
    assert lst.last() is node
    assert len(lst) == 1


def test_node_defaults_to_no_next():
    node = Node("value")
    assert node.next is None
    assert node.content == "value"


def test_iterate_visits_every_content_in_order():
    items = [3, 1, 2]
    seen = []
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in [1, 2, 3]]
    assert list(lst) == [1, 2, 3]
    assert len(mapped) == len(lst)


def test_map_failure_deletes_built_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [101, 102]


def test_pop_front_returns_content_and_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]
    assert len(lst) == 1


def test_pop_front_last_item_empties_list():
    lst = LinkedList(["z"])
    assert lst.pop_front() == "z"
    assert lst.last() is None
    assert len(lst) == 0
    lst.add_back("again")
    assert list(lst) == ["again"]


def test_pop_front_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content_in_order():
    items = ["p", "q", "r"]
    deleted = []
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_delete():
    lst = LinkedList(range(5))
    lst.clear()
    assert len(lst) == 0
    assert lst.head is None