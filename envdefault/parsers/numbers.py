"""Numeric converters.

Integers are read as plain decimal text at a fixed bit width: ``int`` uses
the platform word size, numpy integer types use their own width. Floats and
complex numbers keep the precision of the requested type and reject finite
literals that overflow it.
"""

from __future__ import annotations

import re
import math

import numpy

from ..errors import InvalidValueError
from ..config.tokens import (
    FLOAT_PATTERN,
    PLATFORM_INT_MAX,
    PLATFORM_INT_MIN,
    SIGNED_INT_PATTERN,
    UNSIGNED_INT_PATTERN,
    FLOAT_SPECIAL_PATTERN,
)


def _parse_decimal(raw: str, pattern: re.Pattern[str], low: int, high: int) -> int:
    if not pattern.fullmatch(raw):
        raise InvalidValueError("not a decimal integer")
    # int() rejects digit strings longer than sys.get_int_max_str_digits()
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > len(str(max(-low, high))):
        raise InvalidValueError(f"out of range [{low}, {high}]")
    value = -int(digits or "0") if raw.startswith("-") else int(digits or "0")
    if value < low or value > high:
        raise InvalidValueError(f"out of range [{low}, {high}]")
    return value


def parse_int(raw: str, target: type = int) -> int:
    """Parse a signed decimal integer at the platform word size.

    ``target`` may be an ``int`` subclass (``IntEnum``), in which case the
    parsed number is passed to it.
    """
    value = _parse_decimal(raw, SIGNED_INT_PATTERN, PLATFORM_INT_MIN, PLATFORM_INT_MAX)
    if target is int:
        return value
    try:
        return target(value)
    except ValueError as exc:
        raise InvalidValueError(f"not a valid {target.__name__}") from exc


def parse_fixed_int(raw: str, target: type[numpy.integer]) -> numpy.integer:
    """Parse a decimal integer into the numpy integer type ``target``.

    Unsigned types accept no sign at all.
    """
    info = numpy.iinfo(target)
    pattern = SIGNED_INT_PATTERN if info.min < 0 else UNSIGNED_INT_PATTERN
    value = _parse_decimal(raw, pattern, int(info.min), int(info.max))
    return target(value)


def parse_float(raw: str, target: type = float):
    """Parse a decimal, scientific or special (inf/nan) float literal.

    Args:
        raw: Raw environment value.
        target: ``float`` or a numpy floating type.

    Returns:
        The value as an instance of ``target``.

    Raises:
        InvalidValueError: Malformed literal, or a finite literal that does
            not fit the width of ``target``.
    """
    if FLOAT_SPECIAL_PATTERN.fullmatch(raw):
        return target(float(raw))
    if not FLOAT_PATTERN.fullmatch(raw):
        raise InvalidValueError("not a float literal")
    value = float(raw)
    if math.isinf(value):
        raise InvalidValueError("float literal out of range")
    if target is float:
        return value
    with numpy.errstate(over="ignore"):
        result = target(value)
    if numpy.isinf(result):
        raise InvalidValueError(f"float literal out of range for {target.__name__}")
    return result


def parse_complex(raw: str, target: type = complex):
    """Parse a complex literal such as ``1+2j``, ``(1-0.5j)`` or ``3j``.

    Infinite parts are accepted only when spelled out as ``inf``/``infinity``;
    a finite literal that overflows the width of ``target`` is rejected.
    """
    if raw != raw.strip() or "_" in raw:
        raise InvalidValueError("not a complex literal")
    try:
        value = complex(raw)
    except ValueError as exc:
        raise InvalidValueError("not a complex literal") from exc
    infinite_parts = math.isinf(value.real) + math.isinf(value.imag)
    if infinite_parts > raw.lower().count("inf"):
        raise InvalidValueError("complex literal out of range")
    if target is complex:
        return value
    with numpy.errstate(over="ignore"):
        result = target(value)
    overflowed = (
        bool(numpy.isinf(result.real)) != math.isinf(value.real)
        or bool(numpy.isinf(result.imag)) != math.isinf(value.imag)
    )
    if overflowed:
        raise InvalidValueError(f"complex literal out of range for {target.__name__}")
    return result


__all__ = ["parse_int", "parse_fixed_int", "parse_float", "parse_complex"]
