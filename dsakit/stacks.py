"""Stacks built on a pair of queues and on a chain of linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class QueueStack:
    """LIFO stack kept in a queue whose front is always the top."""

    def __init__(self) -> None:
        self._main: deque = deque()
        self._spare: deque = deque()

    def push(self, item: Any) -> None:
        self._spare.append(item)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main.popleft()

    def top(self) -> Any:
        """Return the top item; raise IndexError when empty."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)


@dataclass
class _Link:
    data: Any
    below: _Link | None


class LinkedStack:
    """LIFO stack stored as a singly linked chain from the top down."""

    def __init__(self) -> None:
        self._top: _Link | None = None
        self._size = 0

    def push(self, item: Any) -> None:
        self._top = _Link(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError on underflow."""
        if self._top is None:
            raise IndexError("stack underflow")
        item = self._top.data
        self._top = self._top.below
        self._size -= 1
        return item

    def peek(self) -> Any:
        """Return the top item; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.data

    def __iter__(self) -> Iterator:
        """Iterate from the top of the stack to the bottom."""
        link = self._top
        while link is not None:
            yield link.data
            link = link.below

    def __len__(self) -> int:
        return self._size