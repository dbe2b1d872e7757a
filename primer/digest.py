"""SHA-256 digests."""

from __future__ import annotations

import hashlib


def sha256_sum(data: bytes | str) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``; text is encoded as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).digest()


def main(argv: list[str] | None = None) -> int:
    """Print the digests of "x" and "X", whether they match, and the digest size."""
    c1 = sha256_sum(b"x")
    c2 = sha256_sum(b"X")
    print(c1.hex())
    print(c2.hex())
    print(str(c1 == c2).lower())
    print(f"[{len(c1)}]uint8")
    return 0