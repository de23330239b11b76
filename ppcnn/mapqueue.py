"""A thread-safe keyed queue that hands out entries in key order."""

from __future__ import annotations

import threading
from typing import Generic, Hashable, Iterator, Optional, TypeVar

__all__ = ["ConcurrentMapQueue"]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ConcurrentMapQueue(Generic[K, V]):
    """A mapping guarded by a lock; popitem returns the smallest key first."""

    def __init__(self) -> None:
        self._items: dict[K, V] = {}
        self._lock = threading.Lock()

    def push(self, key: K, value: V) -> None:
        """Add an entry; ValueError if the key is already present."""
        with self._lock:
            if key in self._items:
                raise ValueError(f"key has already exist. ({key!r})")
            self._items[key] = value

    def count(self, key: K) -> int:
        """Return 1 if the key is present, otherwise 0."""
        with self._lock:
            return int(key in self._items)

    def popitem(self) -> tuple[K, V]:
        """Remove and return the entry with the smallest key; KeyError if empty."""
        with self._lock:
            if not self._items:
                raise KeyError("popitem(): queue is empty")
            key = min(self._items)
            return key, self._items.pop(key)

    def pop(self, key: K) -> V:
        """Remove and return the value for key; KeyError if absent."""
        with self._lock:
            return self._items.pop(key)

    def get(self, key: K) -> Optional[V]:
        """Return the value for key without removing it, or None if absent."""
        with self._lock:
            return self._items.get(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[K]:
        with self._lock:
            keys = sorted(self._items)
        return iter(keys)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items