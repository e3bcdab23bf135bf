"""Typed environment accessors.

``env_or_default`` always returns a usable value: the parsed variable when it
is set, non-empty and well formed, otherwise the caller's default. The
parser is chosen from the runtime type of the default, so the result has the
same type as the default.

``parse_env`` is the strict form of the same lookup. It raises
``EnvNotSetError`` or ``InvalidValueError`` instead of falling back, which
lets callers tell an unset variable from a malformed one.

Both raise ``UnsupportedTypeError`` when the default's type has no parser.

Usage:
    from envdefault import env_or_default, with_separator

    port = env_or_default("PORT", 8080)
    hosts = env_or_default("HOSTS", ["localhost"], with_separator(","))
"""

from __future__ import annotations

import logging
from typing import TypeVar

from .lookup import require
from .options import Option, Parameters, build_parameters
from .dispatch import ParserHandle, convert, resolve_handle
from .errors import EnvError, InvalidValueError, classify_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse(key: str, handle: ParserHandle, params: Parameters):
    raw = require(key)
    if handle.container is not None and not params.separator:
        raise InvalidValueError("empty separator", key=key)
    try:
        return convert(handle, raw, params)
    except InvalidValueError as exc:
        raise InvalidValueError(exc.reason, key=key) from exc


def parse_env(key: str, default: T, *options: Option) -> T:
    """Parse ``key`` as the type of ``default``, raising on data errors.

    Args:
        key: Environment variable name.
        default: Value whose type selects the parser. It is never returned.
        *options: ``with_separator`` / ``with_time_layout`` options.

    Returns:
        The converted value, of the same type as ``default``.

    Raises:
        UnsupportedTypeError: No parser exists for the type of ``default``.
        EnvNotSetError: The variable is unset or empty.
        InvalidValueError: The variable cannot be converted, or it is set
            and a sequence was requested without a separator.
    """
    handle = resolve_handle(default)
    return _parse(key, handle, build_parameters(options))


def env_or_default(key: str, default: T, *options: Option) -> T:
    """Return ``key`` parsed as the type of ``default``, or ``default``.

    The default is returned unchanged when the variable is unset, empty, or
    cannot be converted. Sequence conversions are all-or-nothing.

    Args:
        key: Environment variable name.
        default: Fallback value; its type selects the parser.
        *options: ``with_separator`` / ``with_time_layout`` options.

    Returns:
        The converted value or ``default``.

    Raises:
        UnsupportedTypeError: No parser exists for the type of ``default``.
    """
    handle = resolve_handle(default)
    try:
        return _parse(key, handle, build_parameters(options))
    except EnvError as exc:
        logger.debug(
            "env %s (%s): using default, %s: %s",
            key,
            handle.label,
            classify_error(exc),
            exc,
        )
        return default


__all__ = ["env_or_default", "parse_env"]
