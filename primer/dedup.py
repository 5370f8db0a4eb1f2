"""Print each distinct line once, in order of first appearance."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line the first time it is seen."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def main(argv: list[str] | None = None) -> int:
    """Copy standard input to standard output, dropping repeated lines."""
    try:
        lines = (line.removesuffix("\n").removesuffix("\r") for line in sys.stdin)
        for line in dedup(lines):
            print(line)
    except (OSError, UnicodeDecodeError) as err:
        print(f"dedup: {err}", file=sys.stderr)
        return 1
    return 0