"""Small string helpers: base names, digit grouping and list formatting."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def basename(s: str) -> str:
    """Remove directory components and a trailing .suffix.

    e.g. a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    return s[:dot] if dot >= 0 else s


def comma(s: str) -> str:
    """Insert commas in a non-negative decimal integer string."""
    head = len(s) % 3 or 3
    groups = [s[:head]] + [s[i:i + 3] for i in range(head, len(s), 3)]
    return ",".join(groups)


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers like a list, separated by commas."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def main(argv: list[str] | None = None) -> int:
    """Print each argument with commas at each power of 1000."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        print(f"  {comma(arg)}")
    return 0


def basename_main(argv: list[str] | None = None) -> int:
    """Print the base name of each file name read from standard input."""
    for line in sys.stdin:
        print(basename(line.removesuffix("\n").removesuffix("\r")))
    return 0