"""Fractal images: the Mandelbrot set and a few other complex functions."""

from __future__ import annotations

import cmath
import io
import sys
from collections.abc import Callable

from PIL import Image

RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024


def _gray(y: int) -> RGB:
    y &= 0xFF
    return (y, y, y)


def _clamp(v: int) -> int:
    if 0 <= v <= 0xFFFFFF:
        return v >> 16
    return 0 if v < 0 else 255


def _ycbcr(y: int, cb: int, cr: int) -> RGB:
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128
    r = yy1 + 91881 * cr1
    g = yy1 - 22554 * cb1 - 46802 * cr1
    b = yy1 + 116130 * cb1
    return (_clamp(r), _clamp(g), _clamp(b))


def _byte(x: float) -> int:
    return int(x) & 0xFF


def mandelbrot(z: complex) -> RGB:
    """Shade z by how quickly it escapes; black if it stays bounded."""
    iterations = 200
    contrast = 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return BLACK


def acos_color(z: complex) -> RGB:
    """Colour z by its complex arc cosine."""
    v = cmath.acos(z)
    blue = (_byte(v.real * 128) + 127) & 0xFF
    red = (_byte(v.imag * 128) + 127) & 0xFF
    return _ycbcr(192, blue, red)


def sqrt_color(z: complex) -> RGB:
    """Colour z by its complex square root."""
    v = cmath.sqrt(z)
    blue = (_byte(v.real * 128) + 127) & 0xFF
    red = (_byte(v.imag * 128) + 127) & 0xFF
    return _ycbcr(128, blue, red)


def newton(z: complex) -> RGB:
    """Shade z by how fast Newton's method finds a root of z**4 - 1."""
    iterations = 37
    contrast = 7
    try:
        for i in range(iterations):
            z -= (z - 1 / (z * z * z)) / 4
            if abs(z * z * z * z - 1) < 1e-6:
                return _gray(255 - contrast * i)
    except (ZeroDivisionError, OverflowError):
        return BLACK
    return BLACK


def render(
    width: int = WIDTH,
    height: int = HEIGHT,
    shade: Callable[[complex], RGB] = mandelbrot,
) -> Image.Image:
    """Render the square from -2-2i to 2+2i as an RGB image, shading each pixel."""
    img = Image.new("RGB", (width, height))
    img.putdata(
        [
            shade(
                complex(
                    px / width * (XMAX - XMIN) + XMIN,
                    py / height * (YMAX - YMIN) + YMIN,
                )
            )
            for py in range(height)
            for px in range(width)
        ]
    )
    return img


def main(argv: list[str] | None = None) -> int:
    """Write a PNG of the Mandelbrot set to standard output."""
    buf = io.BytesIO()
    render(WIDTH, HEIGHT, mandelbrot).save(buf, format="PNG")
    sys.stdout.buffer.write(buf.getvalue())
    sys.stdout.buffer.flush()
    return 0