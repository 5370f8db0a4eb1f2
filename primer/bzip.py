"""A writer that bzip2-compresses what is written to it, and a command using it."""

from __future__ import annotations

import bz2
import shutil
import sys
from types import TracebackType
from typing import BinaryIO

BLOCK_SIZE = 9


class BzipWriter:
    """Compress bytes written to it and pass the result on to an underlying stream.

    Closing flushes the compressed data; it does not close the underlying stream.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        """Whether the writer has been closed."""
        return self._compressor is None

    def _live(self) -> bz2.BZ2Compressor:
        if self._compressor is None:
            raise ValueError("closed")
        return self._compressor

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Compress data and return the number of uncompressed bytes taken."""
        compressor = self._live()
        view = memoryview(data)
        chunk = compressor.compress(view)
        if chunk:
            self._out.write(chunk)
        return view.nbytes

    def close(self) -> None:
        """Write out the rest of the compressed stream."""
        compressor = self._live()
        self._compressor = None
        self._out.write(compressor.flush())

    def __enter__(self) -> BzipWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.closed:
            self.close()


def new_writer(out: BinaryIO) -> BzipWriter:
    """Return a writer for bzip2-compressed streams written to out."""
    return BzipWriter(out)


def main(argv: list[str] | None = None) -> int:
    """Compress standard input to standard output."""
    w = new_writer(sys.stdout.buffer)
    try:
        shutil.copyfileobj(sys.stdin.buffer, w)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        w.close()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0