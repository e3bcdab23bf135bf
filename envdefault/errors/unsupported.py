"""Programming error raised for defaults of an unsupported type."""


class UnsupportedTypeError(TypeError):
    """Raised when no parser exists for the type of the default value.

    This signals a bug at the call site and is never turned into a fallback.

    Attributes:
        value_type: The offending type.
    """

    def __init__(self, value_type: type, detail: str | None = None) -> None:
        name = getattr(value_type, "__qualname__", repr(value_type))
        message = f"unsupported type: {name}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.value_type = value_type


__all__ = ["UnsupportedTypeError"]
