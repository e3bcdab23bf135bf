"""Unit tests for the timestamp converter."""

from __future__ import annotations

import pytest
from datetime import datetime, timedelta, timezone

from envdefault.parsers import parse_time
from envdefault.errors import InvalidValueError


def test_naive_layout_is_utc() -> None:
    value = parse_time("2022-01-20", "%Y-%m-%d")
    assert value == datetime(2022, 1, 20, tzinfo=timezone.utc)
    assert value.tzinfo is timezone.utc


def test_zone_in_layout_is_kept() -> None:
    value = parse_time("2022-01-20T10:00:00+0200", "%Y-%m-%dT%H:%M:%S%z")
    assert value.utcoffset() == timedelta(hours=2)
    assert value == datetime(2022, 1, 20, 8, tzinfo=timezone.utc)


def test_layout_mismatch() -> None:
    with pytest.raises(InvalidValueError):
        parse_time("2022-01-20", "%d/%m/%Y")


def test_empty_layout_never_matches() -> None:
    with pytest.raises(InvalidValueError):
        parse_time("2022-01-20", "")


def test_invalid_calendar_date() -> None:
    with pytest.raises(InvalidValueError):
        parse_time("2022-02-30", "%Y-%m-%d")
