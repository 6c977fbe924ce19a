"""Structured logging for anchorpath."""

from __future__ import annotations

from typing import Dict

from .redaction import DataRedactor
from .structured import LogLevel, StructuredLogger, create_logger

__all__ = [
    "StructuredLogger",
    "LogLevel",
    "create_logger",
    "get_logger",
    "reset_loggers",
    "DataRedactor",
]

_loggers: Dict[str, StructuredLogger] = {}


def get_logger(component: str) -> StructuredLogger:
    """Return the shared logger for ``component``, creating it on first use.

    Loggers are configured from ``anchorpath.config.settings`` at creation time.
    """
    logger = _loggers.get(component)
    if logger is None:
        logger = create_logger(component)
        _loggers[component] = logger
    return logger


def reset_loggers() -> None:
    """Close and forget every shared logger so the next call picks up new settings."""
    for logger in _loggers.values():
        logger.close()
    _loggers.clear()
