"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- logging: level and format of the package logger
- tokens: boolean tokens, integer bounds and literal grammars
"""

from .logging import (
    LOG_LEVEL,
    LOG_FORMAT,
    LOG_DATEFMT,
)
from .tokens import (
    TRUE_TOKENS,
    FALSE_TOKENS,
    PLATFORM_INT_MIN,
    PLATFORM_INT_MAX,
    SIGNED_INT_PATTERN,
    UNSIGNED_INT_PATTERN,
    FLOAT_PATTERN,
    FLOAT_SPECIAL_PATTERN,
    DURATION_UNITS_NS,
    DURATION_PATTERN,
    DURATION_GROUP_PATTERN,
    DURATION_MAX_NS,
)

__all__ = [
    # logging
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_DATEFMT",
    # tokens
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
