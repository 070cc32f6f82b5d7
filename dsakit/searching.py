"""Searching sorted sequences and finding maxima."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def binary_search(values: Sequence, target) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def max_element(values: Iterable):
    """Return the largest value; raise ValueError when there is none."""
    try:
        return max(values)
    except ValueError:
        raise ValueError("max_element() of an empty sequence") from None