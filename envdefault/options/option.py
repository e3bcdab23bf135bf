"""Option values and the builder that folds them into Parameters.

Usage:
    from envdefault.options import with_separator, with_time_layout, build_parameters

    params = build_parameters([with_separator(","), with_time_layout("%Y-%m-%d")])
"""

from __future__ import annotations

from typing import Iterable
from dataclasses import dataclass, replace

from .parameters import Parameters


@dataclass(frozen=True, slots=True)
class Option:
    """Sets a single Parameters field when applied.

    Attributes:
        field: Name of the Parameters field to set.
        value: Value written to that field.
    """

    field: str
    value: str

    def apply(self, params: Parameters) -> Parameters:
        """Return a copy of ``params`` with this option's field replaced."""
        return replace(params, **{self.field: self.value})


def with_separator(separator: str) -> Option:
    """Split sequence values on ``separator``."""
    return Option(field="separator", value=separator)


def with_time_layout(layout: str) -> Option:
    """Parse timestamps with the ``datetime.strptime`` format ``layout``."""
    return Option(field="layout", value=layout)


def build_parameters(options: Iterable[Option]) -> Parameters:
    """Fold ``options`` over empty Parameters; later options win per field."""
    params = Parameters()
    for option in options:
        params = option.apply(params)
    return params


__all__ = ["Option", "with_separator", "with_time_layout", "build_parameters"]
