"""Resolution of a default value into the parser variant that handles it.

The handle is the only place where the runtime type of a default is
inspected. Resolution is total: a default either maps to exactly one
``ParserHandle`` or raises ``UnsupportedTypeError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from ipaddress import IPv4Address, IPv6Address
from urllib.parse import ParseResult, SplitResult

import numpy

from .kinds import Kind
from .containers import Container
from ..errors import UnsupportedTypeError

# Checked in order: bool before int, numpy integers before the builtin int.
SCALAR_KINDS: tuple[tuple[tuple[type, ...], Kind], ...] = (
    ((bool, numpy.bool_), Kind.BOOL),
    ((numpy.signedinteger,), Kind.SIGNED),
    ((numpy.unsignedinteger,), Kind.UNSIGNED),
    ((int,), Kind.INT),
    ((float, numpy.floating), Kind.FLOAT),
    ((complex, numpy.complexfloating), Kind.COMPLEX),
    ((str,), Kind.STRING),
    ((datetime,), Kind.TIME),
    ((timedelta,), Kind.DURATION),
    ((SplitResult, ParseResult), Kind.URL),
    ((IPv4Address, IPv6Address), Kind.IP),
)

ARRAY_KINDS: dict[str, Kind] = {
    "b": Kind.BOOL,
    "i": Kind.SIGNED,
    "u": Kind.UNSIGNED,
    "f": Kind.FLOAT,
    "c": Kind.COMPLEX,
    "U": Kind.STRING,
}


@dataclass(frozen=True, slots=True)
class ParserHandle:
    """Parser variant selected for one call.

    Attributes:
        kind: Scalar kind of the value or of each sequence element.
        scalar_type: Concrete type every converted scalar is built as.
        container: Sequence form of the default, or None for scalars.
        dtype: Array dtype when ``container`` is ``Container.ARRAY``.
    """

    kind: Kind
    scalar_type: type
    container: Container | None = None
    dtype: numpy.dtype | None = None

    @property
    def label(self) -> str:
        name = self.scalar_type.__name__
        if self.container is None:
            return name
        return f"{self.container.value}[{name}]"


def _scalar_kind(value: object) -> Kind | None:
    for types, kind in SCALAR_KINDS:
        if isinstance(value, types):
            return kind
    return None


def _sequence_handle(value: list | tuple) -> ParserHandle:
    container = Container.LIST if type(value) is list else Container.TUPLE
    if not value:
        return ParserHandle(kind=Kind.STRING, scalar_type=str, container=container)

    element_types = {type(item) for item in value}
    if len(element_types) > 1:
        names = ", ".join(sorted(t.__qualname__ for t in element_types))
        raise UnsupportedTypeError(type(value), f"mixed element types: {names}")

    element_type = element_types.pop()
    kind = _scalar_kind(value[0])
    if kind is None:
        raise UnsupportedTypeError(type(value), f"elements of type {element_type.__qualname__}")
    return ParserHandle(kind=kind, scalar_type=element_type, container=container)


def _array_handle(value: numpy.ndarray) -> ParserHandle:
    if value.ndim != 1:
        raise UnsupportedTypeError(type(value), f"{value.ndim}-dimensional array")
    kind = ARRAY_KINDS.get(value.dtype.kind)
    if kind is None:
        raise UnsupportedTypeError(type(value), f"dtype {value.dtype}")
    scalar_type = str if kind is Kind.STRING else value.dtype.type
    return ParserHandle(
        kind=kind,
        scalar_type=scalar_type,
        container=Container.ARRAY,
        dtype=value.dtype,
    )


def resolve_handle(value: object) -> ParserHandle:
    """Select the parser variant for the runtime type of ``value``.

    Args:
        value: The caller's default.

    Returns:
        ParserHandle describing how to convert the raw environment value.

    Raises:
        UnsupportedTypeError: No parser exists for the type of ``value``.
    """
    kind = _scalar_kind(value)
    if kind is not None:
        return ParserHandle(kind=kind, scalar_type=type(value))
    if isinstance(value, numpy.ndarray):
        return _array_handle(value)
    if type(value) in (list, tuple):
        return _sequence_handle(value)
    raise UnsupportedTypeError(type(value))


__all__ = ["ARRAY_KINDS", "SCALAR_KINDS", "ParserHandle", "resolve_handle"]
