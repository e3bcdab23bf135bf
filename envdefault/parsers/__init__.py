"""Stateless converters from one raw string to one typed value.

Every converter raises ``InvalidValueError`` when the text cannot be
converted; falling back to a default is the caller's decision.
"""

from .times import parse_time
from .booleans import parse_bool
from .network import parse_ip, parse_url
from .strings import parse_string, split_sequence
from .durations import parse_duration, format_duration
from .numbers import parse_int, parse_float, parse_complex, parse_fixed_int

__all__ = [
    "format_duration",
    "parse_bool",
    "parse_complex",
    "parse_duration",
    "parse_fixed_int",
    "parse_float",
    "parse_int",
    "parse_ip",
    "parse_string",
    "parse_time",
    "parse_url",
    "split_sequence",
]
