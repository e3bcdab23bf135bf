"""Malformed environment value exception.

The message never includes the raw value, since environment variables
routinely carry credentials.
"""

from .base import EnvError


class InvalidValueError(EnvError, ValueError):
    """Raised when a raw value cannot be converted to the requested type.

    Attributes:
        key: Name of the environment variable, or None while the value is
            still being converted outside of a lookup.
        reason: Short description of why the conversion failed.
    """

    def __init__(self, reason: str, *, key: str | None = None) -> None:
        message = f"{key}: invalid value: {reason}" if key else f"invalid value: {reason}"
        super().__init__(message, key=key)
        self.reason = reason


__all__ = ["InvalidValueError"]
