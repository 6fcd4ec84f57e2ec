"""
Logging configuration for Tunebox.
Provides centralized logging setup with console output only.
"""

import logging
import sys
from typing import Optional
from .config import LOGGING_CONFIG


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Set up logging configuration for the application.
    Console output only - nothing is written to disk.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to enable console logging

    Returns:
        Configured application logger
    """
    level_name = (level or LOGGING_CONFIG["LEVEL"]).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    app_logger = logging.getLogger("tunebox")
    app_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    app_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOGGING_CONFIG["FORMAT"]))
        app_logger.addHandler(console_handler)
    else:
        app_logger.addHandler(logging.NullHandler())

    # Keep records away from the root logger
    app_logger.propagate = False

    return app_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Short module name, e.g. "music_library"

    Returns:
        Logger instance named "tunebox.<name>"
    """
    if not logging.getLogger("tunebox").handlers:
        setup_logging()

    return logging.getLogger(f"tunebox.{name}")
