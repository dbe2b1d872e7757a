"""Celsius and Fahrenheit temperatures and conversions between them."""

from __future__ import annotations

import math
import sys
from decimal import Decimal


def _format_g(x: float) -> str:
    """Format ``x`` with the shortest digits, switching to exponent form outside 1e-4..1e6."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(abs(x))).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    nd = len(text)
    dp = nd + exponent
    exp = dp - 1
    prefix = "-" if x < 0 else ""
    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if nd > 1 else "")
        return f"{prefix}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if dp <= 0:
        return f"{prefix}0.{'0' * -dp}{text}"
    if dp >= nd:
        return f"{prefix}{text}{'0' * (dp - nd)}"
    return f"{prefix}{text[:dp]}.{text[dp:]}"


class _Temperature(float):
    unit = ""

    def __str__(self) -> str:
        return f"{_format_g(float(self))}{self.unit}"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return float.__format__(float(self), spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Celsius(_Temperature):
    """A temperature in degrees Celsius."""

    unit = "°C"


class Fahrenheit(_Temperature):
    """A temperature in degrees Fahrenheit."""

    unit = "°F"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def boiling_point() -> str:
    """Describe the boiling point of water in both scales."""
    f = Fahrenheit(212.0)
    return f"boiling point = {f} or {f_to_c(f)}"


def main(argv: list[str] | None = None) -> int:
    """Convert each numeric argument both ways between Celsius and Fahrenheit."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        try:
            t = float(arg)
        except ValueError:
            print(f"cf: parsing {arg!r}: invalid syntax", file=sys.stderr)
            return 1
        f = Fahrenheit(t)
        c = Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0