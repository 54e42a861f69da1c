"""String and memory helpers following NUL-terminated string semantics."""

from __future__ import annotations

import sys
from itertools import takewhile, zip_longest
from typing import TextIO

NUL = "\0"
_DIGITS = "0123456789"
_SAMPLE = "My Dyn Lib"


def _terminated(s: str) -> str:
    """Return the part of ``s`` before the first NUL character."""
    return s.split(NUL, 1)[0]


def _check_count(n: int, *buffers: bytes | bytearray) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def memset(buffer: bytearray, byte: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``byte``; return the buffer."""
    _check_count(n, buffer)
    buffer[:n] = bytes([byte]) * n
    return buffer


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def strlen(s: str) -> int:
    """Return the length of ``s`` up to its first NUL."""
    return len(_terminated(s))


def strcpy(src: str) -> str:
    """Return a copy of ``src`` up to its first NUL."""
    return _terminated(src)


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return _terminated(dest) + _terminated(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Return at most ``n`` characters of ``src`` appended to ``dest``."""
    return _terminated(dest) + _terminated(src)[: max(n, 0)]


def strncpy(dest: str, src: str, n: int) -> str:
    """Overwrite the first ``n`` characters of ``dest`` with ``src``, NUL padded."""
    n = max(n, 0)
    head = _terminated(src)[:n].ljust(n, NUL)
    return head + dest[n:]


def strcmp(s1: str, s2: str) -> int:
    """Return 0 if equal, else the code difference at the first mismatch."""
    for a, b in zip_longest(_terminated(s1), _terminated(s2), fillvalue=NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(s: str, c: str) -> str | None:
    """Return ``s`` from the first occurrence of ``c``, or None if absent."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    body = _terminated(s)
    if c == NUL:
        return ""
    index = body.find(c)
    return body[index:] if index >= 0 else None


def strspn(s: str, accept: str) -> int:
    """Return the length of the leading run of ``s`` made of ``accept`` characters."""
    allowed = set(_terminated(accept))
    return sum(1 for _ in takewhile(allowed.__contains__, _terminated(s)))


def strpbrk(s: str, accept: str) -> str | None:
    """Return ``s`` from its first character found in ``accept``, or None."""
    allowed = set(_terminated(accept))
    body = _terminated(s)
    return next(
        (body[i:] for i, ch in enumerate(body) if ch in allowed),
        None,
    )


def strstr(haystack: str, needle: str) -> str | None:
    """Return ``haystack`` from the first occurrence of ``needle``, or None.

    An empty haystack never matches, not even an empty needle.
    """
    body = _terminated(haystack)
    if not body:
        return None
    index = body.find(_terminated(needle))
    return body[index:] if index >= 0 else None


def atoi(s: str) -> int:
    """Parse the first run of digits in ``s``.

    Every '-' before that run flips the sign; other characters are skipped.
    Returns 0 when ``s`` holds no digit.
    """
    body = _terminated(s)
    sign = 1
    for start, ch in enumerate(body):
        if ch in _DIGITS:
            break
        if ch == "-":
            sign = -sign
    else:
        return 0
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, body[start:]))
    return sign * int(digits)


def putchar(c: str, stream: TextIO | None = None) -> int:
    """Write one character to ``stream`` (stdout by default); return 1."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    (stream or sys.stdout).write(c)
    return 1


def puts(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline to ``stream`` (stdout by default)."""
    out = stream or sys.stdout
    for ch in _terminated(s):
        putchar(ch, out)
    putchar("\n", out)


def main(argv: list[str] | None = None) -> int:
    """Print the length of a sample string."""
    length = strlen(_SAMPLE)
    puts(str(length), sys.stdout)
    return 0