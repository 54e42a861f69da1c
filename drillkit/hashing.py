"""The djb2 string hash and bucket index helper."""

from __future__ import annotations

_SEED = 5381
_MASK = (1 << 64) - 1


def _key_bytes(key: str | bytes) -> bytes:
    """Return the bytes of ``key`` up to its first NUL byte."""
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    return data.split(b"\0", 1)[0]


def djb2(key: str | bytes) -> int:
    """Return the 64-bit djb2 hash of ``key`` (``hash * 33 + byte``)."""
    value = _SEED
    for byte in _key_bytes(key):
        value = (value * 33 + byte) & _MASK
    return value


def key_index(key: str | bytes, size: int) -> int:
    """Return the bucket index of ``key`` in a table of ``size`` buckets."""
    if size < 1:
        raise ValueError(f"table size must be positive, got {size}")
    return djb2(key) % size