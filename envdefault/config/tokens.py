"""Token tables and literal grammars shared by the converters."""

from __future__ import annotations

import re
import sys
from typing import Final


# ----------------- Booleans -----------------

TRUE_TOKENS: Final[frozenset[str]] = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSE_TOKENS: Final[frozenset[str]] = frozenset({"0", "f", "false", "n", "no", "off"})

# ----------------- Integers -----------------

# Plain ``int`` defaults are read at the platform word size
PLATFORM_INT_MIN: Final[int] = -sys.maxsize - 1
PLATFORM_INT_MAX: Final[int] = sys.maxsize

SIGNED_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
UNSIGNED_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

# ----------------- Floats -----------------

FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
FLOAT_SPECIAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

# ----------------- Durations -----------------

DURATION_UNITS_NS: Final[dict[str, int]] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}
DURATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"([+-]?)((?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)[^0-9.]+)+)"
)
DURATION_GROUP_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"([0-9]*)(?:\.([0-9]*))?([^0-9.]+)"
)
# Largest magnitude a duration literal may express, in nanoseconds
DURATION_MAX_NS: Final[int] = (1 << 63) - 1


__all__ = [
    "TRUE_TOKENS",
    "FALSE_TOKENS",
    "PLATFORM_INT_MIN",
    "PLATFORM_INT_MAX",
    "SIGNED_INT_PATTERN",
    "UNSIGNED_INT_PATTERN",
    "FLOAT_PATTERN",
    "FLOAT_SPECIAL_PATTERN",
    "DURATION_UNITS_NS",
    "DURATION_PATTERN",
    "DURATION_GROUP_PATTERN",
    "DURATION_MAX_NS",
]
