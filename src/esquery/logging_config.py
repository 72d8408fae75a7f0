"""Logging setup for applications embedding esquery."""

from __future__ import annotations

import logging

from esquery.config import get_settings


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for esquery consumers.

    Args:
        level: Log level name or number. Falls back to
            ``Settings.log_level`` when omitted.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    # force=True to prevent duplicate handlers
    logging.basicConfig(level=level, force=True)
    logging.getLogger(__name__).debug("Logging configured at %s", level)
