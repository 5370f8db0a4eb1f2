"""A deep equivalence relation for arbitrary values."""

from __future__ import annotations

import dataclasses
import inspect
import types
from typing import Any

_SCALARS = (bool, int, float, complex, str, bytes)
_MISSING = object()


def _attributes(v: Any) -> list[Any] | None:
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        return [getattr(v, f.name) for f in dataclasses.fields(v)]
    if hasattr(v, "__dict__"):
        return [vars(v)]
    slots = [
        name
        for cls in type(v).__mro__
        for name in getattr(cls, "__slots__", ())
        if name not in ("__dict__", "__weakref__")
    ]
    if slots:
        return [getattr(v, name, _MISSING) for name in slots]
    return None


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None:
        return x is None and y is None
    if type(x) is not type(y):
        return False
    if isinstance(x, _SCALARS):
        return x == y
    if inspect.isroutine(x) or isinstance(x, (type, types.ModuleType)):
        return x == y
    if x is y:
        return True
    key = (id(x), id(y))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        if len(x) != len(y):
            return False
        return all(k in y and _equal(v, y[k], seen) for k, v in x.items())
    if isinstance(x, (set, frozenset)):
        return x == y
    xs, ys = _attributes(x), _attributes(y)
    if xs is not None and ys is not None:
        return len(xs) == len(ys) and all(_equal(a, b, seen) for a, b in zip(xs, ys))
    return bool(x == y)


def equal(x: Any, y: Any) -> bool:
    """Report whether x and y are deeply equal; values must also share a type.

    Mapping keys are compared with ==, not deeply. Cycles are handled.
    """
    return _equal(x, y, set())