"""Integer arithmetic with truncating division and a zero-divisor fallback."""


def add(a: int, b: int) -> int:
    """Return ``a + b``."""
    return a + b


def sub(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def mul(a: int, b: int) -> int:
    """Return ``a * b``."""
    return a * b


def div(a: int, b: int) -> int:
    """Return ``a / b`` truncated toward zero, or 0 when ``b`` is zero."""
    if b == 0:
        return 0
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def mod(a: int, b: int) -> int:
    """Return the remainder matching :func:`div`, or 0 when ``b`` is zero."""
    if b == 0:
        return 0
    return a - b * div(a, b)