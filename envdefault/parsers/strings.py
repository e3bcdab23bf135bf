"""String and sequence splitting converters."""

from __future__ import annotations

from ..errors import InvalidValueError


def parse_string(raw: str, target: type = str) -> str:
    """Return ``raw`` as ``target``, which is ``str`` or one of its subclasses.

    Subclasses such as string enums are built from the raw value, so an
    unknown member is reported as an invalid value.
    """
    if target is str:
        return raw
    try:
        return target(raw)
    except ValueError as exc:
        raise InvalidValueError(f"not a valid {target.__name__}") from exc


def split_sequence(raw: str, separator: str) -> list[str]:
    """Split ``raw`` on ``separator``; an empty separator is rejected."""
    if not separator:
        raise InvalidValueError("empty separator")
    return raw.split(separator)


__all__ = ["parse_string", "split_sequence"]
