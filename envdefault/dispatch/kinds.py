"""Closed set of scalar result kinds."""

from __future__ import annotations

from enum import Enum


class Kind(str, Enum):
    """Enumerates the scalar kinds a default value can resolve to."""

    STRING = "string"
    INT = "int"  # builtin int, platform word size
    SIGNED = "signed"  # numpy signed integers
    UNSIGNED = "unsigned"  # numpy unsigned integers
    FLOAT = "float"
    COMPLEX = "complex"
    BOOL = "bool"
    TIME = "time"
    DURATION = "duration"
    URL = "url"
    IP = "ip"


__all__ = ["Kind"]
