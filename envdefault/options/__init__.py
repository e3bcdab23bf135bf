"""Call options controlling sequence splitting and time layouts."""

from .parameters import Parameters
from .option import Option, with_separator, with_time_layout, build_parameters

__all__ = [
    "Option",
    "Parameters",
    "build_parameters",
    "with_separator",
    "with_time_layout",
]
