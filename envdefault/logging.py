"""Logging setup for the envdefault package logger."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "envdefault"


def configure_logging() -> None:
    """Attach a stream handler to the package logger once per process.

    Level, format and date format come from ``envdefault.config.logging``.
    Later calls reapply the level and formatter to the existing handlers.
    """
    from .config.logging import LOG_LEVEL, LOG_FORMAT, LOG_DATEFMT  # noqa: PLC0415

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers = [h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)]
    if not handlers:
        handler = logging.StreamHandler()
        handler.setLevel(LOG_LEVEL)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        return

    for handler in handlers:
        handler.setLevel(LOG_LEVEL)
        handler.setFormatter(formatter)


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
