"""A chained hash table mapping string keys to string values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from drillkit.hashing import key_index


@dataclass
class _Entry:
    key: str
    value: str


class HashTable:
    """Fixed-size hash table using djb2 and separate chaining.

    New keys go to the front of their bucket; iteration walks the buckets
    in index order and each chain from front to back.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[key_index(key, self.size)]

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if not key:
            raise ValueError("key must be a non-empty string")
        if value is None:
            raise ValueError("value must not be None")
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return
        bucket.insert(0, _Entry(key, value))

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if there is none."""
        if not key:
            return None
        return next(
            (entry.value for entry in self._bucket(key) if entry.key == key),
            None,
        )

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(key) and any(
            entry.key == key for entry in self._bucket(key)
        )

    def __str__(self) -> str:
        body = ", ".join(f"'{key}': '{value}'" for key, value in self)
        return "{" + body + "}"

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()