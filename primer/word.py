"""Palindrome checks for word games."""

from __future__ import annotations


def is_palindrome_bytes(s: str) -> bool:
    """Naive check comparing UTF-8 bytes at each character's starting offset."""
    data = s.encode("utf-8")
    offset = 0
    for ch in s:
        if data[offset] != data[len(data) - 1 - offset]:
            return False
        offset += len(ch.encode("utf-8"))
    return True


def _lower(ch: str) -> str:
    return ch.lower()[0]


def is_palindrome(s: str) -> bool:
    """Report whether ``s`` reads the same both ways, ignoring case and non-letters."""
    letters = [_lower(ch) for ch in s if ch.isalpha()]
    return letters == letters[::-1]