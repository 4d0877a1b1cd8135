"""Logging setup for the playground."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "closure_playground"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_installed_handler: Optional[logging.Handler] = None


def parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level '{level}'")
    return value


def configure_logging(level: str | int = "warning", log_file: Path | None = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Calling this again replaces the handler installed by the previous call.
    An invalid level or an unopenable log file leaves the current handler
    in place.
    """
    global _installed_handler
    numeric_level = parse_level(level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
        _installed_handler.close()
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    _installed_handler = handler
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "parse_level"]
