"""Tests for loguru sink setup."""

from loguru import logger

from tabook.core.logging import configure_logging


def test_configure_logging_filters_below_level():
    """Messages below the configured level are dropped."""
    messages: list[str] = []
    configure_logging("warning", sink=messages.append)
    try:
        logger.info("quiet message")
        logger.warning("loud message")
    finally:
        configure_logging("INFO")

    assert not any("quiet message" in m for m in messages)
    assert any("loud message" in m for m in messages)
