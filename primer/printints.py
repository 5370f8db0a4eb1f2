"""Format a list of ints with commas between them."""

from __future__ import annotations

from collections.abc import Iterable


def ints_to_string(values: Iterable[int]) -> str:
    """Format values in square brackets, separated by commas."""
    return "[" + ", ".join(f"{v:d}" for v in values) + "]"


def main(argv: list[str] | None = None) -> int:
    """Print a small list of ints."""
    print(ints_to_string([1, 2, 3]))
    return 0