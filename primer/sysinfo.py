"""Report the operating system and architecture of the running platform."""

from __future__ import annotations

import platform
import sys

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
}


def target() -> tuple[str, str]:
    """Return the (operating system, architecture) pair for this platform."""
    system = platform.system().lower() or sys.platform
    machine = platform.machine().lower()
    return system, _ARCH_NAMES.get(machine, machine)


def main(argv: list[str] | None = None) -> int:
    """Print the operating system and architecture."""
    system, arch = target()
    sys.stdout.write(f"{system} {arch}\n")
    sys.stdout.flush()
    return 0