"""Logging setup driven by application settings."""

from __future__ import annotations

import logging

from orgchain.core.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure the ``orgchain`` logger hierarchy from ``settings.log_level``."""
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger("orgchain")
    logger.setLevel(settings.log_level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
