"""Timestamp converter."""

from __future__ import annotations

from datetime import datetime, timezone

from ..errors import InvalidValueError


def parse_time(raw: str, layout: str) -> datetime:
    """Parse ``raw`` with the ``strptime`` format ``layout``.

    Layouts without a zone directive produce UTC timestamps. An empty layout
    matches nothing but the empty string, which never reaches a converter.
    """
    try:
        value = datetime.strptime(raw, layout)
    except ValueError as exc:
        raise InvalidValueError(f"does not match time layout {layout!r}") from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


__all__ = ["parse_time"]
