"""Slice growth, in-place filtering, reversal and rotation of integer sequences."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import overload

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class IntSlice(Sequence[int]):
    """A view of a shared backing array with a length and a capacity."""

    __slots__ = ("_array", "_len")

    def __init__(self, values: Iterable[int] = (), cap: int | None = None) -> None:
        items = list(values)
        capacity = len(items) if cap is None else cap
        if capacity < len(items):
            raise ValueError(f"cap {capacity} is less than length {len(items)}")
        self._array = items + [0] * (capacity - len(items))
        self._len = len(items)

    @classmethod
    def _view(cls, array: list[int], length: int) -> IntSlice:
        view = cls.__new__(cls)
        view._array = array
        view._len = length
        return view

    @property
    def cap(self) -> int:
        """Capacity of the backing array."""
        return len(self._array)

    def __len__(self) -> int:
        return self._len

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: int | slice) -> int | list[int]:
        return self._array[: self._len][index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._array[: self._len])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntSlice):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IntSlice({list(self)!r}, cap={self.cap})"

    def __str__(self) -> str:
        return _bracketed(self)

    def append(self, *args: int) -> IntSlice:
        """Return a slice extended by ``args``, reusing the backing array when it fits.

        When the array is too small a new one is allocated, at least doubling
        the current length, so repeated appends cost amortized linear time.
        """
        zlen = self._len + len(args)
        if zlen <= self.cap:
            array = self._array
        else:
            zcap = max(zlen, 2 * self._len)
            array = self._array[: self._len] + [0] * (zcap - self._len)
        array[self._len:zlen] = args
        return IntSlice._view(array, zlen)


def _bracketed(values: Iterable[object]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def growth_table(n: int) -> list[tuple[int, int, list[int]]]:
    """Append 0..n-1 one at a time and record (value, capacity, contents) after each."""
    rows = []
    x = IntSlice()
    for i in range(n):
        y = x.append(i)
        rows.append((i, y.cap, list(y)))
        x = y
    return rows


def nonempty(strings: MutableSequence[str]) -> list[str]:
    """Return the non-empty strings, moving them to the front of ``strings`` in place."""
    kept = [s for s in strings if s]
    strings[: len(kept)] = kept
    return kept


def reverse(s: MutableSequence[int]) -> None:
    """Reverse ``s`` in place."""
    s[:] = s[::-1]


def rotate_left(s: MutableSequence[int], n: int) -> None:
    """Rotate ``s`` left by ``n`` positions in place."""
    if not s:
        return
    n %= len(s)
    s[:] = list(s[n:]) + list(s[:n])


def _parse_int(text: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f'strconv.ParseInt: parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'strconv.ParseInt: parsing "{text}": value out of range')
    return value


def main(argv: list[str] | None = None) -> int:
    """Show slice growth, then reverse the integers on each line of standard input."""
    for i, cap, values in growth_table(10):
        print(f"{i}  cap={cap}\t{_bracketed(values)}")

    a = list(range(6))
    reverse(a)
    print(_bracketed(a))
    s = list(range(6))
    rotate_left(s, 2)
    print(_bracketed(s))

    for line in sys.stdin:
        try:
            ints = [_parse_int(word) for word in line.split()]
        except ValueError as exc:
            print(exc, file=sys.stderr)
            continue
        reverse(ints)
        print(_bracketed(ints))
    return 0