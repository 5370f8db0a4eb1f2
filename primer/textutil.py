"""Small string helpers: base names and digit grouping."""

from __future__ import annotations

import sys


def basename(s: str) -> str:
    """Remove directory components and a trailing .suffix."""
    s = s[s.rfind("/") + 1 :]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def comma(s: str) -> str:
    """Insert commas every three digits in a non-negative decimal string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def basename_main(argv: list[str] | None = None) -> int:
    """Print the base name of each path read from standard input."""
    for line in sys.stdin:
        print(basename(line.removesuffix("\n").removesuffix("\r")))
    return 0


def comma_main(argv: list[str] | None = None) -> int:
    """Print each argument with its digits grouped by commas."""
    for arg in sys.argv[1:] if argv is None else argv:
        print(f"  {comma(arg)}")
    return 0