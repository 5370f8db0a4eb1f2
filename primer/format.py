"""Format any value as a short string without looking inside it."""

from __future__ import annotations

import types

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}

_REFERENCE_TYPES = (
    list,
    dict,
    set,
    bytearray,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.GeneratorType,
)


def _escape(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ch.isprintable():
        return ch
    code = ord(ch)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(s: str) -> str:
    """Return s as a double-quoted literal with non-printable characters escaped."""
    return '"' + "".join(_escape(ch) for ch in s) + '"'


def format_any(value: object) -> str:
    """Format a value by its kind, without inspecting its internal structure."""
    if value is None:
        return "invalid"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return quote(value)
    type_name = type(value).__name__
    if isinstance(value, _REFERENCE_TYPES):
        return f"{type_name} 0x{id(value):x}"
    return f"{type_name} value"