"""GIF animations of random Lissajous figures."""

from __future__ import annotations

import io
import logging
import math
import random
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO

from PIL import Image

PALETTE = [(0, 0, 0), (0, 255, 0), (255, 0, 0)]
BLACK_INDEX, GREEN_INDEX, RED_INDEX = 0, 1, 2

CYCLES = 5
RES = 0.001
SIZE = 100
NFRAMES = 64
DELAY = 8

_log = logging.getLogger(__name__)


def _sample_times() -> list[float]:
    times = []
    t = 0.0
    limit = CYCLES * 2 * math.pi
    while t < limit:
        times.append(t)
        t += RES
    return times


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to ``out``."""
    rng = random.Random() if rng is None else rng
    freq = rng.random() * 3.0
    side = 2 * SIZE + 1
    times = _sample_times()
    xs = [math.sin(t) for t in times]
    green_cols = [SIZE + int(x * SIZE + 0.5) for x in xs]
    red_cols = [SIZE + int(x * SIZE + 0.7) for x in xs]
    flat_palette = [c for rgb in PALETTE for c in rgb]

    frames = []
    phase = 0.0
    for _ in range(NFRAMES):
        pixels = bytearray(side * side)
        for t, gx, rx in zip(times, green_cols, red_cols):
            y = math.sin(t * freq + phase)
            pixels[(SIZE + int(y * SIZE + 0.5)) * side + gx] = GREEN_INDEX
            pixels[(SIZE + int(y * SIZE + 0.7)) * side + rx] = RED_INDEX
        frame = Image.frombytes("P", (side, side), bytes(pixels))
        frame.putpalette(flat_palette)
        frames.append(frame)
        phase += 0.1

    buf = io.BytesIO()
    frames[0].save(
        buf,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
        optimize=False,
    )
    out.write(buf.getvalue())


class _GifHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        buf = io.BytesIO()
        lissajous(buf)
        body = buf.getvalue()
        self.send_response(200)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)


def main(argv: list[str] | None = None) -> int:
    """Write an animation to standard output, or serve one per request with "web"."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "web":
        with ThreadingHTTPServer(("localhost", 8000), _GifHandler) as server:
            server.serve_forever()
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0