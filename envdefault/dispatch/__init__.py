"""Type-driven selection of converters."""

from .kinds import Kind
from .containers import Container
from .table import CONVERTERS, convert
from .handle import ParserHandle, resolve_handle

__all__ = [
    "CONVERTERS",
    "Container",
    "Kind",
    "ParserHandle",
    "convert",
    "resolve_handle",
]
