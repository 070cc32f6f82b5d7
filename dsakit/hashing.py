"""A separately chained hash map and a small hash set."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any


class HashMap:
    """Hash map with a fixed number of buckets, each a list of [key, value] pairs."""

    def __init__(self, size: int = 1000) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        return len(self._buckets)

    def _bucket(self, key: Hashable) -> list[list[Any]]:
        return self._buckets[hash(key) % len(self._buckets)]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._bucket(key)
        for pair in bucket:
            if pair[0] == key:
                pair[1] = value
                return
        bucket.append([key, value])
        self._count += 1

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return default

    def remove(self, key: Hashable) -> None:
        """Remove ``key`` if present; absent keys are ignored."""
        bucket = self._bucket(key)
        kept = [pair for pair in bucket if pair[0] != key]
        self._count -= len(bucket) - len(kept)
        bucket[:] = kept

    def __contains__(self, key: Hashable) -> bool:
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __len__(self) -> int:
        return self._count


class HashSet:
    """A set of unique hashable values."""

    def __init__(self) -> None:
        self._values: set = set()

    def add(self, value: Hashable) -> None:
        """Add ``value``; adding a value already present changes nothing."""
        self._values.add(value)

    def discard(self, value: Hashable) -> None:
        """Remove ``value`` if present."""
        self._values.discard(value)

    def __contains__(self, value: Hashable) -> bool:
        return value in self._values

    def __iter__(self) -> Iterator:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)