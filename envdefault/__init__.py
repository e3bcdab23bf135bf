"""Typed environment variable accessors.

Read an environment variable as the type of a default value, falling back
to the default when the variable is unset, empty, or malformed:

    from datetime import datetime, timezone

    from envdefault import env_or_default, with_separator, with_time_layout

    workers = env_or_default("WORKERS", 4)
    ratios = env_or_default("RATIOS", [0.5], with_separator(","))
    since = env_or_default(
        "SINCE",
        datetime(1992, 12, 1, tzinfo=timezone.utc),
        with_time_layout("%Y-%m-%d"),
    )

Supported defaults:
    - str, bool, int, float, complex
    - numpy scalars: int8..int64, uint8..uint64, float16..float64,
      complex64/complex128, bool_
    - datetime.datetime (needs a time layout), datetime.timedelta
      (duration literals such as ``2h35m``)
    - urllib.parse.SplitResult / ParseResult, ipaddress.IPv4Address / IPv6Address
    - list or tuple of any of the above (needs a separator); an empty list
      or tuple reads strings
    - one-dimensional numpy arrays of bool, integer, float, complex or str dtype

Layout:
    - getenv.py: env_or_default / parse_env entry points
    - options/: with_separator, with_time_layout and the Parameters record
    - dispatch/: default type -> parser variant resolution and converter table
    - parsers/: one converter per scalar kind
    - lookup.py: the only reader of os.environ
    - errors/: data errors and the unsupported-type programming error
    - config/: logging settings and literal grammars
"""

import logging

from .parsers import format_duration
from .getenv import parse_env, env_or_default
from .options import Option, Parameters, with_separator, with_time_layout
from .errors import (
    EnvError,
    EnvNotSetError,
    InvalidValueError,
    UnsupportedTypeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EnvError",
    "EnvNotSetError",
    "InvalidValueError",
    "Option",
    "Parameters",
    "UnsupportedTypeError",
    "env_or_default",
    "format_duration",
    "parse_env",
    "with_separator",
    "with_time_layout",
]
