"""Shared logging utilities for the recommendation services.

Usage example:
    from growth_lab.observability.logging import get_logger, set_log_level

    set_log_level("WARNING")
    logger = get_logger("growth_lab.recommendations")
    logger.info("Ranked %s topics for %s", topic_count, user_id)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_LEVEL_NAMES = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_configured: dict[str, logging.Logger] = {}
_level = logging.INFO


class UnknownLogLevelError(ValueError):
    """Raised when a log level name is not one of the standard levels."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unknown log level {value!r}. Use one of: {', '.join(sorted(_LEVEL_NAMES))}."
        )


def parse_log_level(value: str) -> int:
    """Convert a level name such as ``"info"`` into its numeric level."""
    name = value.strip().upper()
    if name not in _LEVEL_NAMES:
        raise UnknownLogLevelError(value)
    return logging.getLevelNamesMapping()[name]


def set_log_level(value: str) -> None:
    """Apply a level to every logger handed out so far and to later ones."""
    global _level
    _level = parse_log_level(value)
    for logger in _configured.values():
        logger.setLevel(_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing UTC-stamped lines to stderr.

    Args:
        name: Logger name (use a stable module-qualified name).
    """
    existing = _configured.get(name)
    if existing is not None:
        return existing

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(_level)
    _configured[name] = logger
    return logger
