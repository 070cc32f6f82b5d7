import pytest

from dsakit.doubly_linked_list import DoublyLinkedList


def test_forward_and_backward_traversal():
    values = [1, 2, 3]
    lst = DoublyLinkedList(values)
    assert list(lst) == values
    assert list(reversed(lst)) == list(reversed(values))
    assert len(lst) == 3


def test_empty_list():
    lst = DoublyLinkedList()
    assert list(lst) == []
    assert list(reversed(lst)) == []
    assert len(lst) == 0


def test_prepend_and_append():
    lst = DoublyLinkedList([1, 2, 3])
    lst.prepend(0)
    assert list(lst) == [0, 1, 2, 3]
    lst.append(5)
    assert list(lst) == [0, 1, 2, 3, 5]
    assert list(reversed(lst)) == [5, 3, 2, 1, 0]


def test_insert_at_middle_position():
    lst = DoublyLinkedList([0, 1, 2, 3, 5])
    lst.insert_at(4, 2)
    assert list(lst) == [0, 1, 2, 2, 3, 5]
    assert list(reversed(lst)) == list(reversed(list(lst)))
    assert len(lst) == 6


def test_insert_at_first_keeps_back_links():
    lst = DoublyLinkedList([1, 2])
    lst.insert_at(1, 0)
    assert list(lst) == [0, 1, 2]
    assert list(reversed(lst)) == [2, 1, 0]


def test_insert_at_end_position():
    lst = DoublyLinkedList([1, 2])
    lst.insert_at(3, 9)
    assert list(lst) == [1, 2, 9]
    assert list(reversed(lst)) == [9, 2, 1]


def test_insert_into_empty_list():
    lst = DoublyLinkedList()
    lst.insert_at(1, 7)
    assert list(lst) == [7]
    assert list(reversed(lst)) == [7]


@pytest.mark.parametrize("position", [0, -2, 5])
def test_insert_at_invalid_position(position):
    lst = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.insert_at(position, 9)
    assert list(lst) == [1, 2, 3]


def test_delete_sequence():
    lst = DoublyLinkedList([1, 2, 3])
    assert lst.pop_front() == 1
    assert list(lst) == [2, 3]
    assert lst.pop_back() == 3
    assert list(lst) == [2]
    assert lst.pop_back() == 2
    assert list(lst) == []
    assert list(reversed(lst)) == []


def test_pop_on_empty_raises():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.pop_front()
    with pytest.raises(IndexError):
        lst.pop_back()


def test_reusable_after_emptying():
    lst = DoublyLinkedList([1])
    lst.pop_front()
    lst.append(4)
    lst.prepend(3)
    assert list(lst) == [3, 4]
    assert list(reversed(lst)) == [4, 3]


@pytest.mark.parametrize("values", [[1], [1, 2], list(range(15))])
def test_reverse_iteration_mirrors_forward(values):
    lst = DoublyLinkedList(values)
    assert list(reversed(lst)) == list(reversed(list(lst)))
    assert len(lst) == len(values)