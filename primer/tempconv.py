"""Celsius and Fahrenheit temperatures and conversions between them."""

from __future__ import annotations

import math
import re
import sys
from decimal import Decimal


def format_g(x: float) -> str:
    """Format x with the fewest digits that read back exactly, like a %g verb."""
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, x) < 0 else ""
    if x == 0:
        return sign + "0"
    parts = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    point = len(digits) + int(parts.exponent)
    exponent = point - 1
    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "+" if exponent >= 0 else "-"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


class Celsius(float):
    """A temperature in degrees Celsius."""

    def __str__(self) -> str:
        return f"{format_g(self)}°C"


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""

    def __str__(self) -> str:
        return f"{format_g(self)}°F"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


_FLOAT_SYNTAX = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    if not _FLOAT_SYNTAX.fullmatch(text):
        raise ValueError(f'strconv.ParseFloat: parsing "{text}": invalid syntax')
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError(f'strconv.ParseFloat: parsing "{text}": value out of range')
    return value


def boiling_main(argv: list[str] | None = None) -> int:
    """Print the boiling point of water in both scales."""
    f = 212.0
    c = (f - 32) * 5 / 9
    print(f"boiling point = {format_g(f)}°F or {format_g(c)}°C")
    return 0


def ftoc_main(argv: list[str] | None = None) -> int:
    """Print two Fahrenheit-to-Celsius conversions."""
    for f in (32.0, 212.0):
        print(f"{format_g(f)}°F = {format_g(f_to_c(f))}°C")
    return 0


def cf_main(argv: list[str] | None = None) -> int:
    """Convert each numeric argument to Celsius and Fahrenheit."""
    for arg in sys.argv[1:] if argv is None else argv:
        try:
            t = _parse_float(arg)
        except ValueError as err:
            print(f"cf: {err}", file=sys.stderr)
            return 1
        f = Fahrenheit(t)
        c = Celsius(t)
        print("%s = %s, %s = %s" % (f, f_to_c(f), c, c_to_f(c)))
    return 0