"""Convert a PNG image to JPEG."""

from __future__ import annotations

import io
import sys
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

QUALITY = 95


def to_jpeg(src: BinaryIO, dst: BinaryIO) -> str:
    """Read a PNG from ``src``, write it as JPEG to ``dst`` and return the input kind.

    Raises ValueError if the input is not a PNG image or cannot be decoded.
    """
    data = src.read()
    try:
        img = Image.open(io.BytesIO(data))
    except UnidentifiedImageError as exc:
        raise ValueError("image: unknown format") from exc
    if img.format != "PNG":
        raise ValueError("image: unknown format")
    try:
        img.load()
    except OSError as exc:
        raise ValueError(f"png: {exc}") from exc
    kind = "png"
    print(f"Input format = {kind}", file=sys.stderr)
    if img.mode == "1":
        img = img.convert("L")
    elif img.mode not in ("L", "RGB"):
        img = img.convert("RGB")
    img.save(dst, format="JPEG", quality=QUALITY)
    return kind


def main(argv: list[str] | None = None) -> int:
    """Convert a PNG on standard input to a JPEG on standard output."""
    try:
        to_jpeg(sys.stdin.buffer, sys.stdout.buffer)
    except ValueError as exc:
        print(f"jpeg: {exc}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0