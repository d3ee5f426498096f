"""
Logger utility for consistent logging across the Google Drive app.

This module provides a standardized way to create and configure loggers
throughout the application, ensuring consistent log formatting and behavior.

Features:
- Consistent log format across all modules
- Configurable log level based on environment variables
- Stream handler to stdout for easy viewing in console/terminal
- Optional rotating debug log file
- Prevents duplicate log handlers when called multiple times
"""

import os
import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level_from_env() -> int:
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, log_level_name, logging.INFO)


def setup_logging() -> logging.Logger:
    """
    Configure global logging for the application.

    Returns:
        logging.Logger: Application logger configured for the app
    """
    debug_mode = os.getenv("DEBUG", "False").lower() == "true"
    log_level = _level_from_env()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if debug_mode else log_level)
    root_logger.addHandler(console_handler)

    if debug_mode or os.getenv("ENABLE_DEBUG_LOG", "False").lower() == "true":
        log_dir = Path(os.getenv("LOG_DIR", "logs"))
        log_dir.mkdir(exist_ok=True)
        debug_file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "debug.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        debug_file_handler.setLevel(log_level)
        debug_file_handler.setFormatter(
            logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        root_logger.addHandler(debug_file_handler)

    # Third-party libraries are chatty at INFO
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.ERROR)

    logger = logging.getLogger('gdrive_app')
    logger.info(f"Logging initialized with level {logging.getLevelName(log_level)}")
    return logger


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger instance with consistent formatting.

    If neither the logger nor the root logger has handlers, a stdout handler is
    attached so messages are visible before setup_logging() runs.

    Args:
        name: Logger name, usually __name__.
        level: Logging level; defaults to LOG_LEVEL from the environment.

    Returns:
        logging.Logger: Configured logger instance.
    """
    if level is None:
        level = _level_from_env()

    logger = logging.getLogger(name or __name__)
    logger.setLevel(level)

    root_logger = logging.getLogger()
    if not logger.handlers and not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
