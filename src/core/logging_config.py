"""Sink configuration for loguru. Only entry points call this, library modules just import `logger`."""

import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a single stderr sink at the requested level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
