"""Converter table keyed by scalar kind, and sequence packing."""

from __future__ import annotations

from typing import Any, Callable

import numpy

from .kinds import Kind
from .handle import ParserHandle
from .containers import Container
from ..options import Parameters
from ..parsers import (
    parse_ip,
    parse_int,
    parse_url,
    parse_bool,
    parse_time,
    parse_float,
    parse_string,
    parse_complex,
    parse_duration,
    split_sequence,
    parse_fixed_int,
)

Converter = Callable[[str, type, Parameters], Any]

CONVERTERS: dict[Kind, Converter] = {
    Kind.STRING: lambda raw, target, _params: parse_string(raw, target),
    Kind.INT: lambda raw, target, _params: parse_int(raw, target),
    Kind.SIGNED: lambda raw, target, _params: parse_fixed_int(raw, target),
    Kind.UNSIGNED: lambda raw, target, _params: parse_fixed_int(raw, target),
    Kind.FLOAT: lambda raw, target, _params: parse_float(raw, target),
    Kind.COMPLEX: lambda raw, target, _params: parse_complex(raw, target),
    Kind.BOOL: lambda raw, target, _params: parse_bool(raw, target),
    Kind.TIME: lambda raw, _target, params: parse_time(raw, params.layout),
    Kind.DURATION: lambda raw, _target, _params: parse_duration(raw),
    Kind.URL: lambda raw, target, _params: parse_url(raw, target),
    Kind.IP: lambda raw, _target, _params: parse_ip(raw),
}


def _pack(values: list[Any], handle: ParserHandle) -> Any:
    if handle.container is Container.LIST:
        return values
    if handle.container is Container.TUPLE:
        return tuple(values)
    # string arrays are sized to the parsed values, not to the default's width
    dtype = "U" if handle.kind is Kind.STRING else handle.dtype
    return numpy.array(values, dtype=dtype)


def convert(handle: ParserHandle, raw: str, params: Parameters) -> Any:
    """Convert ``raw`` as described by ``handle``.

    Sequences are split on ``params.separator`` and converted element by
    element; the first failing element aborts the whole conversion.

    Raises:
        InvalidValueError: The value, or any element of it, is malformed.
    """
    converter = CONVERTERS[handle.kind]
    if handle.container is None:
        return converter(raw, handle.scalar_type, params)
    items = split_sequence(raw, params.separator)
    return _pack([converter(item, handle.scalar_type, params) for item in items], handle)


__all__ = ["CONVERTERS", "Converter", "convert"]
