"""Comparison sorts and bucket sort; each returns a new sorted list."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterable, Iterator


def insertion_sort(values: Iterable) -> list:
    """Sort by inserting each item after any equal items already placed."""
    result: list = []
    for value in values:
        insort_right(result, value)
    return result


def _merge(left: list, right: list) -> Iterator:
    left_iter, right_iter = iter(left), iter(right)
    sentinel = object()
    a = next(left_iter, sentinel)
    b = next(right_iter, sentinel)
    while a is not sentinel and b is not sentinel:
        if a <= b:
            yield a
            a = next(left_iter, sentinel)
        else:
            yield b
            b = next(right_iter, sentinel)
    if a is not sentinel:
        yield a
        yield from left_iter
    if b is not sentinel:
        yield b
        yield from right_iter


def merge_sort(values: Iterable) -> list:
    """Stable top-down merge sort; the left half takes the middle element."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(_merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable) -> list:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) using one bucket per input value."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[min(int(count * value), count - 1)].append(value)
    return [value for bucket in buckets for value in insertion_sort(bucket)]