"""ASCII character classification and absolute value."""

from __future__ import annotations


def _code(c: int | str) -> int:
    """Return the code point of a single character or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_upper(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII upper-case letter."""
    return 65 <= _code(c) <= 90


def is_lower(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII lower-case letter."""
    return 97 <= _code(c) <= 122


def is_alpha(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII letter of either case."""
    return is_lower(c) or is_upper(c)


def is_digit(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def abs_value(n: int) -> int:
    """Return the absolute value of ``n``."""
    return n if n >= 0 else -n