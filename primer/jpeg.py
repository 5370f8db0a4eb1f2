"""Convert a PNG or JPEG image to JPEG."""

from __future__ import annotations

import io
import sys
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

_KNOWN_FORMATS = ["PNG", "JPEG"]
_JPEG_MODES = {"L", "RGB", "CMYK"}


def to_jpeg(inp: BinaryIO, out: BinaryIO) -> None:
    """Decode an image from inp and write it to out as a JPEG of quality 95."""
    data = inp.read()
    try:
        img = Image.open(io.BytesIO(data), formats=_KNOWN_FORMATS)
    except UnidentifiedImageError as err:
        raise ValueError("image: unknown format") from err
    with img:
        img.load()
        print("Input format =", img.format.lower(), file=sys.stderr)
        converted = img if img.mode in _JPEG_MODES else img.convert("RGB")
        buf = io.BytesIO()
        converted.save(buf, format="JPEG", quality=95)
    out.write(buf.getvalue())


def main(argv: list[str] | None = None) -> int:
    """Read an image from standard input and write a JPEG to standard output."""
    try:
        to_jpeg(sys.stdin.buffer, sys.stdout.buffer)
    except (ValueError, OSError) as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0