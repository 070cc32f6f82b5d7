"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A chain of nodes reachable from the head; positions count from 1."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        new_node = _Node(value)
        if self._head is None:
            self._head = new_node
        else:
            self._node_at(self._size - 1).next = new_node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` before the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it sits at 1-based ``position``.

        The position must name an existing node, or be 1 for an empty list.
        """
        if not 1 <= position <= max(self._size, 1):
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self.prepend(value)
            return
        prev = self._node_at(position - 2)
        prev.next = _Node(value, prev.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("linked list is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("linked list is empty")
        if self._head.next is None:
            return self.pop_front()
        second_last = self._node_at(self._size - 2)
        last = second_last.next
        second_last.next = None
        self._size -= 1
        return last.data

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if self._head is None:
            raise IndexError("linked list is empty")
        if not 1 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            return self.pop_front()
        prev = self._node_at(position - 2)
        removed = prev.next
        prev.next = removed.next
        self._size -= 1
        return removed.data

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        prev = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev