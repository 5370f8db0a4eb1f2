"""Print command-line arguments joined by a separator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO


def echo(
    newline: bool, sep: str, args: Sequence[str], out: TextIO | None = None
) -> None:
    """Write args joined by sep to out, followed by a newline if requested."""
    stream = sys.stdout if out is None else out
    stream.write(sep.join(args))
    if newline:
        stream.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Run the echo command with -n and -s flags."""
    parser = argparse.ArgumentParser(prog="echo")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    opts = parser.parse_args(sys.argv[1:] if argv is None else argv)
    try:
        echo(not opts.n, opts.s, opts.args)
    except OSError as err:
        print(f"echo: {err}", file=sys.stderr)
        return 1
    return 0