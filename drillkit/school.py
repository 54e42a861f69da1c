"""Print the school banner."""

from __future__ import annotations

import sys
from typing import TextIO

BANNER = (
    "j#0000000000000000000000000000000000000",
    "j#000000000000000000@Q**g00000000000000",
    "j#0000000000000000*]++]4000000000000000",
    "j#000000000000000k]++]++*N#000000000000",
    "j#0000000000000*C+++]++]++]J*0000000000",
    "j#00000000000@+]++qwwwp=]++++]*00000000",
    "j#0000000000*+++]q#0000k+]+]++]4#000000",
    "j#00000000*C+]+]w#0000*]+++]+]++0000000",
    "j#0000we+]wW000***C++]++]+]++++40000000",
    "j#000000000*C+]+]]+]++]++]++]+q#0000000",
    "j#0000000*]+]+++++++]++]+++]+++J0000000",
    "j#000000C++]=]+]+]+]++]++]+]+]+]=000000",
    "j#00000k+]++]+++]+]++qwW0000000AgW00000",
    "j#00000k++]++]+]+++qW#00000000000000000",
    "j#00000A]++]++]++]++J**0000000000000000",
    "j#000000e]++]+++]++]++]J000000000000000",
    "j#0000000A]++]+]++]++]++000000000000000",
    "j#000000000w]++]+]++]+qW#00000000000000",
    "j#00000000000w]++++]*0##000000000000000",
    "j#0000000000000Ag]+]++*0000000000000000",
    "j#00000000000000000we]+]Q00000000000000",
    "j#0000000000000@@+wgdA]+J00000000000000",
    "j#0000000000000k?qwgdC=]4#0000000000000",
    "j#00000000000000w]+]++qw#00000000000000",
    '"!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!',
)


def print_school(stream: TextIO | None = None) -> None:
    """Write the banner to ``stream`` (stdout by default)."""
    out = stream or sys.stdout
    for line in BANNER:
        out.write(line + "\n")


def main(argv: list[str] | None = None) -> int:
    """Print the banner and return the exit status."""
    print_school()
    return 0