"""Display the structure of a value, one line per leaf."""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from primer.format import format_any


def _type_name(x: Any) -> str:
    return "<nil>" if x is None else type(x).__name__


def _fields(v: Any) -> list[tuple[str, Any]] | None:
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        return [(f.name, getattr(v, f.name)) for f in dataclasses.fields(v)]
    if isinstance(v, tuple) and hasattr(type(v), "_fields"):
        return list(zip(type(v)._fields, v))
    return None


def _lines(path: str, v: Any) -> Iterator[str]:
    if v is None:
        yield f"{path} = nil"
        return
    fields = _fields(v)
    if fields is not None:
        for name, value in fields:
            yield from _lines(f"{path}.{name}", value)
    elif isinstance(v, (list, tuple)):
        for i, item in enumerate(v):
            yield from _lines(f"{path}[{i}]", item)
    elif isinstance(v, dict):
        for key, value in v.items():
            yield from _lines(f"{path}[{format_any(key)}]", value)
    else:
        yield f"{path} = {format_any(v)}"


def display(name: str, x: Any, out: TextIO | None = None) -> None:
    """Write every leaf of x, each under the path that reaches it from name."""
    stream = sys.stdout if out is None else out
    stream.write(f"Display {name} ({_type_name(x)}):\n")
    if x is None:
        stream.write(f"{name} = invalid\n")
        return
    for line in _lines(name, x):
        stream.write(line + "\n")