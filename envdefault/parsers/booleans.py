"""Boolean converter."""

from __future__ import annotations

from ..errors import InvalidValueError
from ..config.tokens import TRUE_TOKENS, FALSE_TOKENS


def parse_bool(raw: str, target: type = bool):
    """Parse a boolean token (``true``, ``0``, ``yes``, ``off``...).

    Args:
        raw: Raw environment value.
        target: ``bool`` or ``numpy.bool_``.

    Returns:
        The parsed flag as an instance of ``target``.
    """
    token = raw.lower()
    if token in TRUE_TOKENS:
        return target(True)
    if token in FALSE_TOKENS:
        return target(False)
    raise InvalidValueError("unrecognised boolean token")


__all__ = ["parse_bool"]
