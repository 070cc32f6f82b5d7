"""Binary trees of linked nodes: traversals, level-order insertion, deletion and search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node holding ``data`` and optional children."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def _walk_with_parents(root: Node | None) -> Iterator[tuple[Node, Node | None]]:
    """Yield ``(node, parent)`` pairs in level order."""
    if root is None:
        return
    queue: deque[tuple[Node, Node | None]] = deque([(root, None)])
    while queue:
        node, parent = queue.popleft()
        yield node, parent
        if node.left is not None:
            queue.append((node.left, node))
        if node.right is not None:
            queue.append((node.right, node))


def inorder(root: Node | None) -> list:
    """Return the values in left, node, right order."""
    result = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def preorder(root: Node | None) -> list:
    """Return the values in node, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Node | None) -> list:
    """Return the values in left, right, node order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Node | None) -> list:
    """Return the values breadth first, left to right within each level."""
    return [node.data for node, _ in _walk_with_parents(root)]


def insert(root: Node | None, key: Any) -> Node:
    """Place ``key`` in the first free child slot in level order; return the root."""
    if root is None:
        return Node(key)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = Node(key)
            break
        queue.append(node.left)
        if node.right is None:
            node.right = Node(key)
            break
        queue.append(node.right)
    return root


def delete(root: Node | None, key: Any) -> Node | None:
    """Remove ``key`` by overwriting it with the deepest, rightmost value.

    The last node in level order that holds ``key`` is the one replaced.
    Returns the root, or None when the tree becomes empty.
    Raises KeyError when ``key`` is not in the tree.
    """
    if root is None:
        return None
    target = None
    last, last_parent = root, None
    for node, parent in _walk_with_parents(root):
        if node.data == key:
            target = node
        last, last_parent = node, parent
    if target is None:
        raise KeyError(key)
    if last_parent is None:
        return None
    target.data = last.data
    if last_parent.left is last:
        last_parent.left = None
    else:
        last_parent.right = None
    return root


def contains(root: Node | None, key: Any) -> bool:
    """Return True if any node holds ``key``."""
    return any(node.data == key for node, _ in _walk_with_parents(root))