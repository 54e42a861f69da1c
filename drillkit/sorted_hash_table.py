"""A hash table that also keeps its entries in key order."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass

from drillkit.hashing import key_index


@dataclass
class _Entry:
    key: str
    value: str


class SortedHashTable:
    """Chained hash table whose iteration follows ascending key order."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]
        self._sorted_keys: list[str] = []
        self._entries: dict[str, _Entry] = {}

    def _find(self, key: str) -> _Entry | None:
        bucket = self._buckets[key_index(key, self.size)]
        return next((entry for entry in bucket if entry.key == key), None)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if not key:
            raise ValueError("key must be a non-empty string")
        if value is None:
            raise ValueError("value must not be None")
        existing = self._find(key)
        if existing is not None:
            existing.value = value
            return
        entry = _Entry(key, value)
        self._buckets[key_index(key, self.size)].insert(0, entry)
        self._entries[key] = entry
        bisect.insort(self._sorted_keys, key)

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if there is none."""
        if not key:
            return None
        entry = self._find(key)
        return None if entry is None else entry.value

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for key in self._sorted_keys:
            yield key, self._entries[key].value

    def __reversed__(self) -> Iterator[tuple[str, str]]:
        for key in reversed(self._sorted_keys):
            yield key, self._entries[key].value

    def __len__(self) -> int:
        return len(self._sorted_keys)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(key) and self._find(key) is not None

    @staticmethod
    def _format(items: Iterator[tuple[str, str]]) -> str:
        return "{" + ", ".join(f"'{k}': '{v}'" for k, v in items) + "}"

    def __str__(self) -> str:
        return self._format(iter(self))

    def format_reversed(self) -> str:
        """Return the table formatted in descending key order."""
        return self._format(reversed(self))

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._sorted_keys.clear()
        self._entries.clear()