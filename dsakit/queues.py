"""A fixed-capacity FIFO queue backed by a circular buffer."""

from __future__ import annotations

from typing import Any


class CircularQueue:
    """FIFO queue that holds at most ``capacity`` items in a ring of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._tail = capacity - 1
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._tail = (self._tail + 1) % len(self._slots)
        self._slots[self._tail] = item
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._size -= 1
        return item

    def front(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        """Return the rear item without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._tail]