"""Package logging configuration values."""

import os


LOG_LEVEL = (os.getenv("ENVDEFAULT_LOG_LEVEL", "WARNING") or "WARNING").upper()
LOG_FORMAT = os.getenv(
    "ENVDEFAULT_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s",
)
LOG_DATEFMT = os.getenv("ENVDEFAULT_LOG_DATEFMT", "%Y-%m-%d %H:%M:%S")


__all__ = [
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_DATEFMT",
]
