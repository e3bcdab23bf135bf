"""Duration literal converter and formatter.

A duration literal is an optionally signed sequence of decimal numbers, each
with an optional fraction and a unit suffix, such as ``300ms``, ``-1.5h`` or
``2h45m``. Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m``
and ``h``. The bare literal ``0`` needs no unit.

Usage:
    from envdefault.parsers.durations import parse_duration, format_duration

    parse_duration("2h35m")                          # timedelta(seconds=9300)
    format_duration(timedelta(hours=2, minutes=35))  # "2h35m0s"
"""

from __future__ import annotations

from datetime import timedelta

from ..errors import InvalidValueError
from ..config.tokens import (
    DURATION_MAX_NS,
    DURATION_PATTERN,
    DURATION_UNITS_NS,
    DURATION_GROUP_PATTERN,
)

_MICROSECOND = timedelta(microseconds=1)
_NS_PER_US = 1_000
_US_PER_MS = 1_000
_US_PER_S = 1_000_000
_US_PER_M = 60 * _US_PER_S
_US_PER_H = 60 * _US_PER_M
# longer whole parts always overflow; extra fraction digits are dropped
_MAX_WHOLE_DIGITS = len(str(DURATION_MAX_NS))
_MAX_FRACTION_DIGITS = 30


def _nanoseconds_to_timedelta(total_ns: int) -> timedelta:
    # timedelta stops at microseconds; ties round to even
    micros, rest = divmod(total_ns, _NS_PER_US)
    if rest > _NS_PER_US // 2 or (rest == _NS_PER_US // 2 and micros % 2):
        micros += 1
    return timedelta(microseconds=micros)


def parse_duration(raw: str) -> timedelta:
    """Parse a duration literal into a timedelta.

    Raises:
        InvalidValueError: Malformed literal, unknown unit, missing unit, or a
            magnitude beyond roughly 292 years.
    """
    if raw in ("0", "+0", "-0"):
        return timedelta(0)
    match = DURATION_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidValueError("not a duration literal")
    sign, body = match.groups()

    total_ns = 0
    for whole, fraction, unit in DURATION_GROUP_PATTERN.findall(body):
        scale = DURATION_UNITS_NS.get(unit)
        if scale is None:
            raise InvalidValueError("unknown duration unit")
        whole = whole.lstrip("0")
        if len(whole) > _MAX_WHOLE_DIGITS:
            raise InvalidValueError("duration out of range")
        total_ns += int(whole or "0") * scale
        fraction = fraction[:_MAX_FRACTION_DIGITS]
        if fraction:
            total_ns += int(fraction) * scale // 10 ** len(fraction)
        if total_ns > DURATION_MAX_NS + (sign == "-"):
            raise InvalidValueError("duration out of range")

    if sign == "-":
        total_ns = -total_ns
    return _nanoseconds_to_timedelta(total_ns)


def _format_fraction(amount: int, scale: int) -> str:
    whole, fraction = divmod(amount, scale)
    if not fraction:
        return str(whole)
    digits = str(fraction).rjust(len(str(scale)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def format_duration(value: timedelta) -> str:
    """Render ``value`` as a duration literal that ``parse_duration`` reads back.

    Durations under one second use the largest fitting sub-second unit
    (``150ms``, ``12µs``); longer ones are written as hours, minutes and
    seconds (``1h0m2.5s``).
    """
    micros = value // _MICROSECOND
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < _US_PER_MS:
        return f"{sign}{micros}µs"
    if micros < _US_PER_S:
        return f"{sign}{_format_fraction(micros, _US_PER_MS)}ms"

    hours, rest = divmod(micros, _US_PER_H)
    minutes, rest = divmod(rest, _US_PER_M)
    text = f"{_format_fraction(rest, _US_PER_S)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


__all__ = ["parse_duration", "format_duration"]
