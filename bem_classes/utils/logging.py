"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
bem_classes package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the bem_classes package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)

    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger("bem_classes")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "bem_classes" or name.startswith("bem_classes."):
        return logging.getLogger(name)
    return logging.getLogger(f"bem_classes.{name}")


# Initialize logging on module import
setup_logging()
