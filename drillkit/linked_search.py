"""Jump search over linked lists and search over a skip list with an express lane."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list of integers that knows its index."""

    n: int
    index: int
    next: ListNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class SkipNode:
    """Node of a singly linked list with an express lane."""

    n: int
    index: int
    next: SkipNode | None = field(default=None, repr=False)
    express: SkipNode | None = field(default=None, repr=False)


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link ``values`` into a list and return its head, or None if empty."""
    nodes = [ListNode(value, index) for index, value in enumerate(values)]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    return nodes[0] if nodes else None


def build_skip_list(values: Iterable[int]) -> SkipNode | None:
    """Link ``values`` into a skip list and return its head, or None if empty.

    The express lane stops at every index that is a multiple of the
    integer square root of the length.
    """
    nodes = [SkipNode(value, index) for index, value in enumerate(values)]
    if not nodes:
        return None
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    lane = nodes[:: math.isqrt(len(nodes))]
    for node, following in zip(lane, lane[1:]):
        node.express = following
    return nodes[0]


def jump_list(
    head: ListNode | None, size: int, value: int, stream: TextIO | None = None
) -> ListNode | None:
    """Return the first node holding ``value`` in a sorted list of ``size`` nodes.

    Jumps ahead by the integer square root of ``size``, then walks the
    block that may hold the value. Returns None when it is absent.
    """
    if head is None or size == 0:
        return None
    out = stream if stream is not None else sys.stdout
    step = 0
    step_size = math.isqrt(size)
    node = jump = head
    while jump.index + 1 < size and jump.n < value:
        node = jump
        step += step_size
        while jump.index < step and jump.index + 1 != size:
            jump = jump.next
        out.write(f"Value checked at index [{jump.index}] = [{jump.n}]\n")
    out.write(
        f"Value found between indexes [{node.index}] and [{jump.index}]\n"
    )
    while node.index < jump.index and node.n < value:
        out.write(f"Value checked at index [{node.index}] = [{node.n}]\n")
        node = node.next
    out.write(f"Value checked at index [{node.index}] = [{node.n}]\n")
    return node if node.n == value else None


def linear_skip(
    head: SkipNode | None, value: int, stream: TextIO | None = None
) -> SkipNode | None:
    """Search a sorted skip list for ``value``.

    Follows the express lane, then walks the regular lane. Returns the
    first node, before the last node of the list, whose value is not less
    than ``value``; returns None if the walk reaches the last node.
    """
    if head is None:
        return None
    out = stream if stream is not None else sys.stdout
    temp = head
    while temp.express is not None and temp.express.n < value:
        express = temp.express
        out.write(f"Value checked at index [{express.index}] = [{express.n}]\n")
        temp = express
    stop = temp
    while stop.next is not stop.express:
        stop = stop.next
    if temp.express is not None:
        express = temp.express
        out.write(f"Value checked at index [{express.index}] = [{express.n}]\n")
        out.write(
            f"Value found between indexes [{temp.index}] and [{express.index}]\n"
        )
    else:
        out.write(
            f"Value found between indexes [{temp.index}] and [{stop.index}]\n"
        )
    while temp is not stop and temp.n < value:
        out.write(f"Value checked at index [{temp.index}] = [{temp.n}]\n")
        temp = temp.next
    out.write(f"Value checked at index [{temp.index}] = [{temp.n}]\n")
    return None if temp is stop else temp