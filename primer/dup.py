"""Report lines that appear more than once in the input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import TextIO


def _strip_line_end(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def count_lines(stream: Iterable[str]) -> Counter[str]:
    """Count each line of a text stream, line endings removed."""
    return Counter(_strip_line_end(line) for line in stream)


def count_split(data: str) -> Counter[str]:
    """Count the pieces of data split on every newline."""
    return Counter(data.split("\n"))


def duplicates(counts: Mapping[str, int]) -> list[tuple[str, int]]:
    """Return (line, count) for every line counted more than once."""
    return [(line, n) for line, n in counts.items() if n > 1]


def _print_duplicates(counts: Mapping[str, int], out: TextIO) -> None:
    for line, n in duplicates(counts):
        print(f"{n}\t{line}", file=out)


def dup1_main(argv: list[str] | None = None) -> int:
    """Count lines from standard input and print the duplicated ones."""
    _print_duplicates(count_lines(sys.stdin), sys.stdout)
    return 0


def dup2_main(argv: list[str] | None = None) -> int:
    """Count lines from the named files, or standard input when none are named."""
    files = sys.argv[1:] if argv is None else argv
    counts: Counter[str] = Counter()
    if not files:
        counts.update(count_lines(sys.stdin))
    for name in files:
        try:
            with open(name, encoding="utf-8", errors="replace", newline="") as f:
                counts.update(count_lines(f))
        except OSError as err:
            print(f"dup2: {err}", file=sys.stderr)
    _print_duplicates(counts, sys.stdout)
    return 0


def dup3_main(argv: list[str] | None = None) -> int:
    """Read each named file whole and print the duplicated lines."""
    files = sys.argv[1:] if argv is None else argv
    counts: Counter[str] = Counter()
    for name in files:
        try:
            with open(name, "rb") as f:
                data = f.read()
        except OSError as err:
            print(f"dup3: {err}", file=sys.stderr)
            continue
        counts.update(count_split(data.decode("utf-8", errors="replace")))
    _print_duplicates(counts, sys.stdout)
    return 0