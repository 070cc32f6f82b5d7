"""A bounded binary max-heap used as a priority queue."""

from __future__ import annotations

from collections.abc import Iterator


class MaxHeap:
    """Array-backed max-heap holding at most ``capacity`` priorities."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Iterate over the priorities in array order."""
        return iter(list(self._items))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0 and items[(i - 1) // 2] < items[i]:
            parent = (i - 1) // 2
            self._swap(parent, i)
            i = parent

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == i:
                return
            self._swap(i, largest)
            i = largest

    def insert(self, priority) -> None:
        """Add ``priority``; raise OverflowError when the heap is full."""
        if len(self._items) >= self._capacity:
            raise OverflowError("heap is full")
        self._items.append(priority)
        self._sift_up(len(self._items) - 1)

    def peek(self):
        """Return the largest priority without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def extract_max(self):
        """Remove and return the largest priority."""
        if not self._items:
            raise IndexError("heap is empty")
        result = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return result

    def change_priority(self, index: int, priority) -> None:
        """Replace the priority at ``index`` and restore heap order."""
        self._check_index(index)
        old = self._items[index]
        self._items[index] = priority
        if old < priority:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def remove(self, index: int):
        """Remove and return the priority stored at ``index``."""
        self._check_index(index)
        removed = self._items[index]
        self._items[index] = self._items[0]
        self._sift_up(index)
        self.extract_max()
        return removed