"""Loguru sink setup."""

import sys

from loguru import logger


def configure_logging(level: str = "INFO", sink=None) -> None:
    """Replace loguru's default sink with one at ``level``.

    Args:
        level: Minimum level name, case-insensitive.
        sink: Any loguru sink; defaults to stderr.
    """
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper())
    logger.debug(f"Logging configured: level={level.upper()}")
