"""Read input, bzip2-compress it and write it out."""

from __future__ import annotations

import sys
from typing import BinaryIO

from primer.bzip import new_writer

_CHUNK = 32 * 1024


def _copy(src: BinaryIO, writer) -> int:
    total = 0
    for chunk in iter(lambda: src.read(_CHUNK), b""):
        total += writer.write(chunk)
    return total


def compress_stream(src: BinaryIO, dst: BinaryIO) -> int:
    """Compress everything from ``src`` onto ``dst``; return the bytes read."""
    with new_writer(dst) as writer:
        return _copy(src, writer)


def main(argv: list[str] | None = None) -> int:
    """Compress standard input to standard output."""
    writer = new_writer(sys.stdout.buffer)
    try:
        _copy(sys.stdin.buffer, writer)
    except OSError as exc:
        print(f"bzipper: {exc}", file=sys.stderr)
        return 1
    try:
        writer.close()
    except OSError as exc:
        print(f"bzipper: close: {exc}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0