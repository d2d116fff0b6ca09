"""
Publishing context logger.

Provides logging interface for publishing context with automatic [publish] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[publish]"


def _log_info(message: str) -> None:
    """Log info message with [publish] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [publish] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
