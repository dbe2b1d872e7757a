"""PNG rendering of the Mandelbrot fractal, plus a few other complex colourings."""

from __future__ import annotations

import cmath
import math
import sys

from PIL import Image

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024


def _gray(y: int) -> Color:
    return (y, y, y, 255)


def _channel(v: int) -> int:
    if 0 <= v < 1 << 24:
        return v >> 16
    return 0 if v < 0 else 255


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    """Convert a Y'CbCr triple to RGBA with fixed-point JFIF coefficients."""
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128
    r = yy1 + 91881 * cr1
    g = yy1 - 22554 * cb1 - 46802 * cr1
    b = yy1 + 116130 * cb1
    return (_channel(r), _channel(g), _channel(b), 255)


def _to_byte(x: float) -> int:
    """Truncate a float to an integer and keep its low eight bits."""
    if not math.isfinite(x):
        return 0
    return int(x) & 0xFF


def mandelbrot(z: complex) -> Color:
    """Shade ``z`` by how quickly the iteration v = v*v + z escapes."""
    iterations = 200
    contrast = 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - ((contrast * n) & 0xFF))
    return BLACK


def acos(z: complex) -> Color:
    """Colour ``z`` by its complex arc cosine."""
    v = cmath.acos(z)
    blue = (_to_byte(v.real * 128) + 127) & 0xFF
    red = (_to_byte(v.imag * 128) + 127) & 0xFF
    return _ycbcr(192, blue, red)


def sqrt(z: complex) -> Color:
    """Colour ``z`` by its complex square root."""
    v = cmath.sqrt(z)
    blue = (_to_byte(v.real * 128) + 127) & 0xFF
    red = (_to_byte(v.imag * 128) + 127) & 0xFF
    return _ycbcr(128, blue, red)


def newton(z: complex) -> Color:
    """Shade ``z`` by how fast Newton's method finds a root of z**4 - 1."""
    iterations = 37
    contrast = 7
    for i in range(iterations):
        try:
            z -= (z - 1 / (z * z * z)) / 4
        except ZeroDivisionError:
            return BLACK
        if abs(z * z * z * z - 1) < 1e-6:
            return _gray(255 - contrast * i)
    return BLACK


def render(width: int = WIDTH, height: int = HEIGHT) -> Image.Image:
    """Render the Mandelbrot set over [-2, 2] x [-2, 2] as an RGBA image."""
    pixels = [
        mandelbrot(
            complex(
                px / width * (XMAX - XMIN) + XMIN,
                py / height * (YMAX - YMIN) + YMIN,
            )
        )
        for py in range(height)
        for px in range(width)
    ]
    img = Image.new("RGBA", (width, height))
    img.putdata(pixels)
    return img


def main(argv: list[str] | None = None) -> int:
    """Write a PNG of the Mandelbrot set to standard output."""
    render().save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0