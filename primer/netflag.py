"""An integer type used as a bit field of interface flags."""

from __future__ import annotations

import enum


class Flags(enum.IntFlag):
    """Network interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16


def is_up(v: Flags) -> bool:
    """Report whether the UP flag is set."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return v with the UP flag cleared."""
    return v & ~Flags.UP


def set_broadcast(v: Flags) -> Flags:
    """Return v with the BROADCAST flag set."""
    return v | Flags.BROADCAST


def is_cast(v: Flags) -> bool:
    """Report whether the broadcast or multicast flag is set."""
    return v & (Flags.BROADCAST | Flags.MULTICAST) != 0


def _show(v: Flags, flag: bool) -> str:
    return f"{int(v):b} {'true' if flag else 'false'}"


def main(argv: list[str] | None = None) -> int:
    """Demonstrate setting, clearing and testing flags."""
    v = Flags.MULTICAST | Flags.UP
    print(_show(v, is_up(v)))
    v = turn_down(v)
    print(_show(v, is_up(v)))
    v = set_broadcast(v)
    print(_show(v, is_up(v)))
    print(_show(v, is_cast(v)))
    return 0