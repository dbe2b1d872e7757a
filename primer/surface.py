"""SVG rendering of the 3-D surface z = sin(r)/r."""

from __future__ import annotations

import math

from primer.tempconv import _format_g

WIDTH, HEIGHT = 600, 320
CELLS = 100
XYRANGE = 30.0
XYSCALE = WIDTH / 2 / XYRANGE
ZSCALE = HEIGHT * 0.4
ANGLE = math.pi / 6

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)

_HEADER = (
    "<svg xmlns='http://www.w3.org/2000/svg' "
    "style='stroke: grey; fill: white; stroke-width: 0.7' "
    f"width='{WIDTH}' height='{HEIGHT}'>"
)


def f(x: float, y: float) -> float:
    """Surface height at (x, y); undefined (NaN) at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) isometrically onto the canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def _polygon(i: int, j: int) -> str:
    points = (corner(i + 1, j), corner(i, j), corner(i, j + 1), corner(i + 1, j + 1))
    coords = " ".join(f"{_format_g(px)},{_format_g(py)}" for px, py in points)
    return f"<polygon points='{coords}'/>\n"


def render_svg() -> str:
    """Return the whole SVG document."""
    cells = (_polygon(i, j) for i in range(CELLS) for j in range(CELLS))
    return _HEADER + "".join(cells) + "</svg>\n"


def main(argv: list[str] | None = None) -> int:
    """Write the SVG document to standard output."""
    print(render_svg(), end="")
    return 0