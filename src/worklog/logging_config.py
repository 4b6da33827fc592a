"""Loguru configuration for the worklog CLI."""

import sys

from loguru import logger

DEFAULT_LEVEL = "WARNING"


def configure_logging(level: str = DEFAULT_LEVEL) -> None:
    """Send log records at ``level`` and above to stderr.

    Replaces loguru's default sink so repeated calls do not duplicate output.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
