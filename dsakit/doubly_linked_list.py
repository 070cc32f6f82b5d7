"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Nodes linked forwards and backwards; positions count from 1."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
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

    def __reversed__(self) -> Iterator:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def prepend(self, value: Any) -> None:
        """Add ``value`` before the first node."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it sits at 1-based ``position`` (up to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self.prepend(value)
            return
        if position == self._size + 1:
            self.append(value)
            return
        before = self._head
        for _ in range(position - 2):
            before = before.next
        node = _Node(value, before, before.next)
        before.next.prev = node
        before.next = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("linked list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("linked list is empty")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.data