"""
Logging configuration for stringkit.

Provides a single setup entry point for applications embedding the toolkit
and namespaced loggers for the library modules.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "stringkit"


def setup_logging(
    level: Optional[str] = None, format_detailed: bool = False
) -> logging.Logger:
    """
    Set up logging configuration for the toolkit.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               If None, will use environment variable LOG_LEVEL or default to INFO
        format_detailed: If True, use detailed format with timestamps and module names

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Clear any existing handlers to avoid duplication
    logger.handlers.clear()

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if format_detailed or os.getenv("LOG_FORMAT", "").lower() == "detailed":
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    # Keep every logger under the stringkit namespace
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f'{ROOT_LOGGER_NAME}.{name.split(".")[-1]}'

    return logging.getLogger(name)
