"""Logging utilities."""
from __future__ import annotations

import logging

from doctor_service.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger, defaulting to the ``LOG_LEVEL`` setting."""

    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


__all__ = ["configure_logging"]
