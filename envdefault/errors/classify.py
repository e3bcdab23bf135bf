"""Exception classification helpers for log fields."""

from __future__ import annotations

from .not_set import EnvNotSetError
from .invalid import InvalidValueError
from .unsupported import UnsupportedTypeError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (EnvNotSetError, "not_set"),
    (InvalidValueError, "invalid_value"),
    (UnsupportedTypeError, "unsupported_type"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a log-friendly category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
