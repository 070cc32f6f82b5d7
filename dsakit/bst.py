"""Binary search trees built from the same nodes as plain binary trees."""

from __future__ import annotations

from typing import Any

from .binary_tree import Node


def insert(root: Node | None, key: Any) -> Node:
    """Insert ``key`` keeping search order; duplicates are ignored. Return the root."""
    new_node = Node(key)
    if root is None:
        return new_node
    node = root
    while True:
        if node.data == key:
            return root
        if node.data < key:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left


def successor(node: Node) -> Node | None:
    """Return the smallest node in the right subtree of ``node``, if any."""
    current = node.right
    while current is not None and current.left is not None:
        current = current.left
    return current


def delete(root: Node | None, key: Any) -> Node | None:
    """Remove ``key`` if present and return the new root."""
    if root is None:
        return None
    if root.data < key:
        root.right = delete(root.right, key)
    elif root.data > key:
        root.left = delete(root.left, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        heir = successor(root)
        root.data = heir.data
        root.right = delete(root.right, heir.data)
    return root