"""Print command-line arguments, joined by a separator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

GREETING = "Hello, 世界"


def echo(newline: bool, sep: str, args: Iterable[str], out: TextIO | None = None) -> None:
    """Write ``args`` joined by ``sep`` to ``out``, followed by a newline if asked."""
    stream = sys.stdout if out is None else out
    stream.write(sep.join(args))
    if newline:
        stream.write("\n")


def join_args(args: Iterable[str]) -> str:
    """Join arguments with single spaces."""
    return " ".join(args)


def hello_world() -> str:
    """Return the classic greeting."""
    return GREETING


def main(argv: list[str] | None = None) -> int:
    """Print the positional arguments, honouring ``-n`` and ``-s``."""
    parser = argparse.ArgumentParser(prog="echo", description="Print arguments.")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", metavar="SEP", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    opts = parser.parse_args(argv)
    echo(not opts.n, opts.s, opts.args, sys.stdout)
    return 0