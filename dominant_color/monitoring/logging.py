"""Logging configuration module."""

from __future__ import annotations

import logging

from dominant_color.config.settings import get_settings

PACKAGE_LOGGER = "dominant_color"

# httpx reports every image fetch at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging() -> None:
    """Configure root logger according to project conventions.

    ``LOG_LEVEL`` applies to this package; HTTP client chatter stays at
    WARNING unless debugging.
    """

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)
