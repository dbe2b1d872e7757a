"""Find duplicate lines, remove them, and count characters."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

UTF_MAX = 4

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


def _strip_line(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def count_lines(lines: Iterable[str]) -> Counter[str]:
    """Count each line, ignoring line terminators."""
    return Counter(_strip_line(line) for line in lines)


def count_files(paths: Iterable[str | Path], errors: TextIO | None = None) -> Counter[str]:
    """Count lines across files; unreadable files are reported and skipped."""
    report = sys.stderr if errors is None else errors
    counts: Counter[str] = Counter()
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as fh:
                counts.update(count_lines(fh))
        except OSError as exc:
            print(f"dup2: {exc}", file=report)
    return counts


def split_count(data: str) -> Counter[str]:
    """Count the pieces of ``data`` split on newlines, including a trailing empty one."""
    return Counter(data.split("\n"))


def duplicates(counts: Counter[str]) -> list[tuple[str, int]]:
    """Return the (line, count) pairs seen more than once."""
    return [(line, n) for line, n in counts.items() if n > 1]


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line the first time it appears."""
    seen: set[str] = set()
    for raw in lines:
        line = _strip_line(raw)
        if line not in seen:
            seen.add(line)
            yield line


def _quote_rune(ch: str) -> str:
    if ch in _ESCAPES:
        body = _ESCAPES[ch]
    elif ch.isprintable():
        body = ch
    else:
        cp = ord(ch)
        if cp < 0x80:
            body = f"\\x{cp:02x}"
        elif cp < 0x10000:
            body = f"\\u{cp:04x}"
        else:
            body = f"\\U{cp:08x}"
    return f"'{body}'"


@dataclass
class CharCounts:
    """Character frequencies, UTF-8 length histogram and invalid byte count."""

    counts: Counter[str] = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0

    def report(self) -> str:
        """Render the counts as a tab-separated report."""
        parts = ["rune\tcount\n"]
        parts.extend(f"{_quote_rune(c)}\t{n}\n" for c, n in self.counts.items())
        parts.append("\nlen\tcount\n")
        parts.extend(f"{i}\t{n}\n" for i, n in enumerate(self.utflen) if i > 0)
        if self.invalid > 0:
            parts.append(f"\n{self.invalid} invalid UTF-8 characters\n")
        return "".join(parts)


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield (character, size) pairs; invalid bytes come out one at a time as None."""
    pos = 0
    while pos < len(data):
        size = _sequence_length(data[pos])
        ch = None
        if size:
            try:
                ch = data[pos:pos + size].decode("utf-8")
            except UnicodeDecodeError:
                ch = None
        if ch is None:
            yield None, 1
            pos += 1
        else:
            yield ch, size
            pos += size


def char_count(data: bytes) -> CharCounts:
    """Count the Unicode characters in UTF-8 encoded ``data``."""
    result = CharCounts()
    for ch, size in _runes(data):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[size] += 1
    return result


def _print_duplicates(counts: Counter[str]) -> None:
    for line, n in duplicates(counts):
        print(f"{n}\t{line}")


def main(argv: list[str] | None = None) -> int:
    """Print duplicated lines from the named files, or from standard input."""
    files = sys.argv[1:] if argv is None else argv
    counts = count_files(files, sys.stderr) if files else count_lines(sys.stdin)
    _print_duplicates(counts)
    return 0


def dedup_main(argv: list[str] | None = None) -> int:
    """Print each line of standard input once."""
    try:
        for line in dedup(sys.stdin):
            print(line)
    except OSError as exc:
        print(f"dedup: {exc}", file=sys.stderr)
        return 1
    return 0


def charcount_main(argv: list[str] | None = None) -> int:
    """Report character counts for standard input."""
    try:
        data = sys.stdin.buffer.read()
    except OSError as exc:
        print(f"charcount: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(char_count(data).report())
    return 0