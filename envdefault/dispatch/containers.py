"""Closed set of sequence containers."""

from __future__ import annotations

from enum import Enum


class Container(str, Enum):
    """Enumerates the sequence forms a default value can take."""

    LIST = "list"
    TUPLE = "tuple"
    ARRAY = "ndarray"


__all__ = ["Container"]
