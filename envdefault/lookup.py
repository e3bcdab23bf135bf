"""Single point of access to the process environment.

Every parser reads variables through ``lookup``; nothing in the package
writes to ``os.environ``. Mutating the environment from another thread while
a lookup runs is the caller's responsibility.
"""

from __future__ import annotations

import os

from .errors import EnvNotSetError


def lookup(key: str) -> str | None:
    """Return the raw value of ``key``, or None when unset or empty."""
    value = os.environ.get(key)
    if not value:
        return None
    return value


def require(key: str) -> str:
    """Return the raw value of ``key`` or raise EnvNotSetError."""
    value = lookup(key)
    if value is None:
        raise EnvNotSetError(key)
    return value


__all__ = ["lookup", "require"]
