"""Centralized exception classes for environment parsing.

Organization:
    - base.py: Common base for data errors (unset, malformed)
    - not_set.py: Variable unset or empty
    - invalid.py: Variable present but not convertible
    - unsupported.py: Default value of a type with no parser (programming error)
    - classify.py: Exception-to-label mapping
"""

from .base import EnvError
from .not_set import EnvNotSetError
from .classify import classify_error
from .invalid import InvalidValueError
from .unsupported import UnsupportedTypeError

__all__ = [
    # Data errors
    "EnvError",
    "EnvNotSetError",
    "InvalidValueError",
    # Programming errors
    "UnsupportedTypeError",
    # Classification
    "classify_error",
]
