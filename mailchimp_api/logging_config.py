"""
Logging Configuration Module.

This module provides an opt-in logging setup for applications using the
MailChimp client. The library itself only creates module loggers via
``logging.getLogger(__name__)``; nothing here runs on import.

Features:
- Configurable log levels per module
- Console and optional file logging
- Simple, detailed and JSON line formats
"""

import logging
from pathlib import Path
from typing import Optional

from .config import MailChimpSettings

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "mailchimp_api": "INFO",
    "mailchimp_api.client": "DEBUG",
    "mailchimp_api.managers": "DEBUG",
    # Third-party libraries (reduce noise)
    "httpx": "WARNING",
    "httpcore": "WARNING",
}


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging for an application using the client.

    Args:
        log_level: Override the settings log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override the settings format (simple, detailed, json)
        log_file: Optional path of a file that receives DEBUG-level records
    """
    if log_level is None or log_format is None:
        settings = MailChimpSettings()
        log_level = log_level or settings.log_level
        log_format = log_format or settings.log_format
    level = log_level.upper()
    format_str = FORMATS.get(log_format, DETAILED_FORMAT)

    formatter = logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S")

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={log_format}, log_file={log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
