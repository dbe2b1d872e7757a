"""Population counts and network interface flags as a bit field."""

from __future__ import annotations

import enum

_MASK64 = (1 << 64) - 1


def _build_table() -> tuple[int, ...]:
    table = [0] * 256
    for i in range(1, 256):
        table[i] = table[i // 2] + (i & 1)
    return tuple(table)


_PC = _build_table()


def pop_count(x: int) -> int:
    """Return the number of set bits in the 64-bit value ``x``."""
    return sum(_PC[b] for b in (x & _MASK64).to_bytes(8, "little"))


class Flags(enum.IntFlag):
    """Network interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16


def is_up(v: Flags) -> bool:
    """Report whether the UP flag is set."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return ``v`` with the UP flag cleared."""
    return Flags(int(v) & ~int(Flags.UP))


def set_broadcast(v: Flags) -> Flags:
    """Return ``v`` with the BROADCAST flag set."""
    return Flags(int(v) | int(Flags.BROADCAST))


def is_cast(v: Flags) -> bool:
    """Report whether broadcast or multicast is set."""
    return int(v) & int(Flags.BROADCAST | Flags.MULTICAST) != 0