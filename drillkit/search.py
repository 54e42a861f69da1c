"""Searches over integer sequences that report every probe they make.

Each search writes one line per comparison to ``stream`` (stdout by
default). Like ``str.find``, a search returns the index of the value or
-1 when it is absent.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import TextIO

NOT_FOUND = -1
_WORD = 1 << 64


def _out(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def _show_range(array: Sequence[int], low: int, high: int, out: TextIO) -> None:
    items = ", ".join(str(item) for item in array[low : high + 1])
    out.write(f"Searching in array: {items}\n")


def _checked(array: Sequence[int], index: int, out: TextIO) -> None:
    out.write(f"Value checked array[{index}] = [{array[index]}]\n")


def _bisect(
    array: Sequence[int], value: int, low: int, high: int, out: TextIO
) -> int:
    """Binary search between ``low`` and ``high`` inclusive."""
    while low <= high:
        mid = (low + high) // 2
        _show_range(array, low, high, out)
        if array[mid] < value:
            low = mid + 1
        elif array[mid] > value:
            high = mid - 1
        else:
            return mid
    return NOT_FOUND


def linear_search(
    array: Sequence[int] | None, value: int, stream: TextIO | None = None
) -> int:
    """Return the first index of ``value``, checking elements in order."""
    out = _out(stream)
    for index, item in enumerate(array or ()):
        out.write(f"Value checked array[{index}] = [{item}]\n")
        if item == value:
            return index
    return NOT_FOUND


def binary_search(
    array: Sequence[int] | None, value: int, stream: TextIO | None = None
) -> int:
    """Return an index of ``value`` in a sorted sequence.

    With repeated values, the index returned need not be the first one.
    """
    if not array:
        return NOT_FOUND
    return _bisect(array, value, 0, len(array) - 1, _out(stream))


def jump_search(
    array: Sequence[int] | None, value: int, stream: TextIO | None = None
) -> int:
    """Return the first index of ``value`` in a sorted sequence.

    Jumps ahead by the integer square root of the length, then scans
    the block that may hold the value.
    """
    if not array:
        return NOT_FOUND
    out = _out(stream)
    size = len(array)
    step = math.isqrt(size)
    low = high = 0
    while high < size and array[high] < value:
        _checked(array, high, out)
        low = high
        high += step
    out.write(f"Value found between indexes [{low}] and [{high}]\n")
    for index in range(low, min(high, size - 1) + 1):
        _checked(array, index, out)
        if array[index] == value:
            return index
    return NOT_FOUND


def _probe(array: Sequence[int], low: int, high: int, value: int) -> int:
    """Estimate the position of ``value`` between ``low`` and ``high``."""
    spread = array[high] - array[low]
    if spread == 0:
        return low
    return int(low + (high - low) / spread * (value - array[low]))


def interpolation_search(
    array: Sequence[int] | None, value: int, stream: TextIO | None = None
) -> int:
    """Return the index of ``value`` in a sorted sequence, probing by interpolation.

    When the search gives up, the last estimated position is reported as
    out of range.
    """
    if not array:
        return NOT_FOUND
    out = _out(stream)
    low, high = 0, len(array) - 1
    while array[high] != array[low] and array[low] <= value <= array[high]:
        pos = _probe(array, low, high, value)
        _checked(array, pos, out)
        if array[pos] < value:
            low = pos + 1
        elif value < array[pos]:
            high = pos - 1
        else:
            return pos
    if value == array[low]:
        _checked(array, low, out)
        return low
    pos = _probe(array, low, high, value)
    out.write(f"Value checked array[{pos % _WORD}] is out of range\n")
    return NOT_FOUND


def exponential_search(
    array: Sequence[int] | None, value: int, stream: TextIO | None = None
) -> int:
    """Return an index of ``value`` in a sorted sequence.

    Doubles a bound until it passes the value, then searches the last
    range binarily.
    """
    if not array:
        return NOT_FOUND
    out = _out(stream)
    size = len(array)
    bound = 1
    while bound < size and array[bound] < value:
        _checked(array, bound, out)
        bound *= 2
    low = bound // 2
    high = min(bound, size - 1)
    out.write(f"Value found between indexes [{low}] and [{high}]\n")
    return _bisect(array, value, low, high, out)


def advanced_binary(
    array: Sequence[int] | None, value: int, stream: TextIO | None = None
) -> int:
    """Return the first index of ``value`` in a sorted sequence, by bisection."""
    if not array:
        return NOT_FOUND
    out = _out(stream)
    low, high = 0, len(array) - 1
    while True:
        mid = (low + high) // 2
        _show_range(array, low, high, out)
        if array[low] == value:
            return low
        if array[low] == array[high]:
            return NOT_FOUND
        if array[mid] < value:
            low = mid + 1
        else:
            high = mid


def main(argv: list[str] | None = None) -> int:
    """Run the linear and binary search demonstrations."""
    out = sys.stdout
    unsorted = [10, 1, 42, 3, 4, 42, 6, 7, -1, 9]
    out.write(f"Found 3 at index: {linear_search(unsorted, 3)}\n\n")
    out.write(f"Found 42 at index: {linear_search(unsorted, 42)}\n\n")
    out.write(f"Found 999 at index: {linear_search(unsorted, 999)}\n")
    out.write("\n")
    ordered = list(range(10))
    out.write(f"Found 2 at index: {binary_search(ordered, 2)}\n\n")
    out.write(f"Found 5 at index: {binary_search(ordered[:5], 5)}\n\n")
    out.write(f"Found 999 at index: {binary_search(ordered, 999)}\n")
    return 0