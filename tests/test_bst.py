import pytest

from dsakit.binary_tree import Node, inorder
from dsakit.bst import delete, insert, successor

VALUES = [50, 30, 20, 40, 70, 60, 80]


def build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def test_inorder_is_sorted():
    assert inorder(build(VALUES)) == sorted(VALUES)


def test_first_value_is_root():
    assert build(VALUES).data == VALUES[0]


def test_duplicates_are_ignored():
    values = [5, 3, 5, 8, 3, 1]
    assert inorder(build(values)) == sorted(set(values))


def test_insert_returns_same_root():
    root = build(VALUES)
    assert insert(root, 65) is root
    assert inorder(root) == sorted(VALUES + [65])


def test_successor_is_smallest_larger_value():
    root = build(VALUES)
    assert successor(root).data == min(v for v in VALUES if v > root.data)


def test_successor_without_right_subtree():
    assert successor(Node(1)) is None


@pytest.mark.parametrize("key", VALUES)
def test_delete_each_key(key):
    root = delete(build(VALUES), key)
    assert inorder(root) == sorted(v for v in VALUES if v != key)


def test_delete_missing_key_leaves_tree():
    assert inorder(delete(build(VALUES), 999)) == sorted(VALUES)


def test_delete_from_empty_tree():
    assert delete(None, 1) is None


def test_delete_single_node():
    assert delete(Node(7), 7) is None


def test_source_example_delete_node_with_two_children():
    root = Node(10)
    root.left = Node(5)
    root.right = Node(15)
    root.right.left = Node(12)
    root.right.right = Node(18)
    root = delete(root, 15)
    assert inorder(root) == [5, 10, 12, 18]
    assert root.right.data == 18