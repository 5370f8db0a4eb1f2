"""Animated GIFs of random Lissajous figures, written out or served over HTTP."""

from __future__ import annotations

import functools
import io
import math
import random
import sys
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO

from PIL import Image

CYCLES = 5
RES = 0.001
SIZE = 100
NFRAMES = 64
DELAY = 8

WHITE_INDEX = 0
BLACK_INDEX = 1
PALETTE = ((255, 255, 255), (0, 0, 0))

_SIDE = 2 * SIZE + 1


@functools.lru_cache(maxsize=1)
def _samples() -> tuple[tuple[float, ...], tuple[int, ...]]:
    """Return the sample angles and the x pixel column of each."""
    ts = []
    t = 0.0
    limit = CYCLES * 2 * math.pi
    while t < limit:
        ts.append(t)
        t += RES
    xs = [SIZE + int(math.sin(t) * SIZE + 0.5) for t in ts]
    return tuple(ts), tuple(xs)


def frames(freq: float) -> Iterator[bytes]:
    """Yield each frame as row-major palette indices for the given y frequency."""
    ts, xs = _samples()
    phase = 0.0
    for _ in range(NFRAMES):
        pixels = bytearray(_SIDE * _SIDE)
        for t, px in zip(ts, xs):
            py = SIZE + int(math.sin(t * freq + phase) * SIZE + 0.5)
            if 0 <= px < _SIDE and 0 <= py < _SIDE:
                pixels[py * _SIDE + px] = BLACK_INDEX
        phase += 0.1
        yield bytes(pixels)


def _palette_bytes() -> list[int]:
    return [channel for color in PALETTE for channel in color]


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to out."""
    rng = random.Random() if rng is None else rng
    freq = rng.random() * 3.0
    images = []
    for data in frames(freq):
        img = Image.frombytes("P", (_SIDE, _SIDE), data)
        img.putpalette(_palette_bytes())
        images.append(img)
    buf = io.BytesIO()
    images[0].save(
        buf,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
    )
    out.write(buf.getvalue())


def serve(address: str = "localhost:8000") -> None:
    """Serve a fresh animation for every request at address."""
    host, _, port = address.rpartition(":")

    class _Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            buf = io.BytesIO()
            lissajous(buf)
            body = buf.getvalue()
            self.send_response(200)
            self.send_header("Content-Type", "image/gif")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

    with ThreadingHTTPServer((host, int(port)), _Handler) as server:
        server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    """Write an animation to standard output, or serve them with "web"."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "web":
        try:
            serve("localhost:8000")
        except OSError as err:
            print(err, file=sys.stderr)
            return 1
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0