"""Slice growth, in-place filtering, reversal and rotation."""

from __future__ import annotations

import itertools
import re
import sys
from collections.abc import Iterable, Iterator
from typing import overload

from primer.format import quote

_MIN_INT64 = -(1 << 63)
_MAX_INT64 = (1 << 63) - 1
_INT_SYNTAX = re.compile(r"[+-]?[0-9]+")


class IntSlice:
    """A view of the first len elements of a shared backing array of ints."""

    __slots__ = ("_array", "_len")

    def __init__(self, values: Iterable[int] = (), *, cap: int | None = None) -> None:
        array = list(values)
        length = len(array)
        if cap is not None:
            if cap < length:
                raise ValueError(f"cap {cap} is less than len {length}")
            array.extend([0] * (cap - length))
        self._array = array
        self._len = length

    @classmethod
    def _view(cls, array: list[int], length: int) -> IntSlice:
        view = cls.__new__(cls)
        view._array = array
        view._len = length
        return view

    @property
    def cap(self) -> int:
        """Capacity of the backing array."""
        return len(self._array)

    def append(self, *args: int) -> IntSlice:
        """Return a slice with args appended, reusing the backing array when it fits."""
        zlen = self._len + len(args)
        if zlen <= self.cap:
            array = self._array
        else:
            zcap = max(zlen, 2 * self._len)
            array = self.tolist() + [0] * (zcap - self._len)
        array[self._len : zlen] = args
        return IntSlice._view(array, zlen)

    def tolist(self) -> list[int]:
        """Return the visible elements as a new list."""
        return self._array[: self._len]

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[int]:
        return itertools.islice(self._array, self._len)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index):
        return self.tolist()[index]

    def __str__(self) -> str:
        return _format_ints(self)

    def __repr__(self) -> str:
        return f"IntSlice({self.tolist()!r}, cap={self.cap})"


def _format_ints(values: Iterable[int]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def nonempty(strings: list[str]) -> list[str]:
    """Move the non-empty strings to the front of the list and return them."""
    kept = [s for s in strings if s != ""]
    strings[: len(kept)] = kept
    return kept


def reverse(s: list[int]) -> None:
    """Reverse a list in place."""
    s.reverse()


def rotate_left(s: list[int], n: int) -> None:
    """Rotate a list left by n positions in place, by three reversals."""
    head, tail = s[:n], s[n:]
    reverse(head)
    reverse(tail)
    s[:] = head + tail
    reverse(s)


def _parse_int(text: str) -> int:
    if not _INT_SYNTAX.fullmatch(text):
        raise ValueError(f'strconv.ParseInt: parsing "{text}": invalid syntax')
    value = int(text)
    if not _MIN_INT64 <= value <= _MAX_INT64:
        raise ValueError(f'strconv.ParseInt: parsing "{text}": value out of range')
    return value


def append_main(argv: list[str] | None = None) -> int:
    """Show how capacity grows as ints are appended one at a time."""
    x = IntSlice()
    for i in range(10):
        y = x.append(i)
        print(f"{i}  cap={y.cap}\t{y}")
        x = y
    return 0


def _format_strings(strings: Iterable[str]) -> str:
    return "[" + " ".join(quote(s) for s in strings) + "]"


def nonempty_main(argv: list[str] | None = None) -> int:
    """Show in-place filtering of empty strings."""
    data = ["one", "", "three"]
    print(_format_strings(nonempty(data)))
    print(_format_strings(data))
    return 0


def rev_main(argv: list[str] | None = None) -> int:
    """Show reversal and rotation, then reverse each line of ints from stdin."""
    a = [0, 1, 2, 3, 4, 5]
    reverse(a)
    print(_format_ints(a))

    s = [0, 1, 2, 3, 4, 5]
    rotate_left(s, 2)
    print(_format_ints(s))

    for line in sys.stdin:
        try:
            ints = [_parse_int(field) for field in line.split()]
        except ValueError as err:
            print(err, file=sys.stderr)
            continue
        reverse(ints)
        print(_format_ints(ints))
    return 0