"""Unit tests for sequence-typed defaults."""

from __future__ import annotations

import numpy
from datetime import datetime, timedelta, timezone

from envdefault import env_or_default, with_separator, with_time_layout


def test_string_list(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "a,b,c")
    assert env_or_default(env_key, ["x"], with_separator(",")) == ["a", "b", "c"]


def test_missing_separator_returns_default(env_key, monkeypatch) -> None:
    default = ["x"]
    monkeypatch.setenv(env_key, "a,b,c")
    assert env_or_default(env_key, default) is default
    assert env_or_default(env_key, default, with_separator("")) is default


def test_empty_list_default_reads_strings(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "a|b")
    assert env_or_default(env_key, [], with_separator("|")) == ["a", "b"]


def test_int_list(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "1,2,3")
    assert env_or_default(env_key, [0], with_separator(",")) == [1, 2, 3]


def test_one_bad_element_falls_back(env_key, monkeypatch) -> None:
    default = [9]
    monkeypatch.setenv(env_key, "1,x,3")
    assert env_or_default(env_key, default, with_separator(",")) is default


def test_wrong_separator_falls_back(env_key, monkeypatch) -> None:
    default = [9]
    monkeypatch.setenv(env_key, "1,2")
    assert env_or_default(env_key, default, with_separator(";")) is default


def test_tuple_stays_tuple(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "3 4")
    assert env_or_default(env_key, (1, 2), with_separator(" ")) == (3, 4)


def test_float_list(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "26.89,0.67")
    assert env_or_default(env_key, [0.0], with_separator(",")) == [26.89, 0.67]


def test_bool_list(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "true,0,on")
    assert env_or_default(env_key, [False], with_separator(",")) == [True, False, True]


def test_typed_empty_array(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "26.89,0.67")
    value = env_or_default(env_key, numpy.array([], dtype=numpy.float32), with_separator(","))
    assert value.dtype == numpy.float32
    assert value.tolist() == [numpy.float32(26.89), numpy.float32(0.67)]


def test_unsigned_array_overflow_falls_back(env_key, monkeypatch) -> None:
    default = numpy.array([1], dtype=numpy.uint8)
    monkeypatch.setenv(env_key, "1,256")
    assert env_or_default(env_key, default, with_separator(",")) is default


def test_duration_list(env_key, monkeypatch) -> None:
    monkeypatch.setenv(env_key, "1s,2m")
    value = env_or_default(env_key, [timedelta(0)], with_separator(","))
    assert value == [timedelta(seconds=1), timedelta(minutes=2)]


def test_time_list_needs_both_options(env_key, monkeypatch) -> None:
    default = [datetime(2000, 1, 1, tzinfo=timezone.utc)]
    monkeypatch.setenv(env_key, "2022-01-20;2022-01-21")

    value = env_or_default(env_key, default, with_separator(";"), with_time_layout("%Y-%m-%d"))
    assert value == [
        datetime(2022, 1, 20, tzinfo=timezone.utc),
        datetime(2022, 1, 21, tzinfo=timezone.utc),
    ]
    assert env_or_default(env_key, default, with_separator(";")) is default
