"""
Logging configuration helpers.
Both HTTP services and the deployment CLI call `configure_logging` once at startup.
"""

from __future__ import annotations

import logging

from string_analyzer.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True


def add_file_handler(path: str, *, logger_name: str | None = None) -> logging.Handler:
    """Mirror log records of `logger_name` (root when None) into `path`."""

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger(logger_name).addHandler(handler)
    return handler
