"""Missing environment variable exception."""

from .base import EnvError


class EnvNotSetError(EnvError):
    """Raised when a variable is unset or set to the empty string.

    The two cases are reported identically.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"{key}: not set", key=key)


__all__ = ["EnvNotSetError"]
