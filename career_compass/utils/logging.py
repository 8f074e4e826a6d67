"""
Logging utilities for the Career Compass backend.

Provides standardized logger configuration following privacy rules.

CRITICAL SECURITY RULES:
- NEVER log the Gemini API key or any other credential
- NEVER log a full student profile (marks, state and skills together)
- NEVER return raw provider errors or stack traces to the client

Acceptable logging:
- Request lifecycle events (e.g., "received", "dispatched", "completed")
- Non-sensitive metadata (e.g., "action=recommendations", "items=4")
- Error kinds and sanitized error messages
"""

import logging
from typing import Optional

from career_compass.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from career_compass.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Guidance request received")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Own handler above; do not repeat the line through the root logger
    logger.propagate = False

    return logger
