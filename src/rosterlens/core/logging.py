"""loguru sink setup driven by AppSettings."""

from __future__ import annotations

import sys

from loguru import logger

from rosterlens.core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Replace loguru's default sink with the configured stderr/file sinks."""
    if settings is None:
        settings = AppSettings()

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)
    if settings.log_file:
        logger.add(settings.log_file, level=settings.log_level)
    logger.debug(f"Logging configured at {settings.log_level} for {settings.environment}")
