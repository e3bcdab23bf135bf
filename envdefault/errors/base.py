"""Base class for environment data errors."""


class EnvError(Exception):
    """Raised when an environment variable cannot produce a value.

    Data errors are resolved into the caller's default by ``env_or_default``
    and surfaced as-is by ``parse_env``.

    Attributes:
        key: Name of the environment variable, when known.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


__all__ = ["EnvError"]
