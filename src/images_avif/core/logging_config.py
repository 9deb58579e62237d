"""Centralized logging configuration for the AVIF converter."""

import os
import sys
import logging
from typing import Optional

DEFAULT_LOG_FORMAT = "structured"

LOG_FORMATS = {
    "structured": (
        "%(asctime)s | %(name)s | %(levelname)-8s | "
        "%(filename)s:%(lineno)d | %(funcName)s() | %(message)s"
    ),
    "simple": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


def resolve_log_format(format_type: Optional[str] = None) -> str:
    """
    Pick the log format name.

    An explicit ``format_type`` (usually ``ConverterConfig.log_format``) wins;
    otherwise ``LOG_FORMAT`` is read, defaulting to structured. Unknown names
    fall back to the simple format.
    """
    name = (format_type or os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT)).lower()
    return name if name in LOG_FORMATS else "simple"


def setup_logger(
    name: str = "images-avif",
    level: Optional[str] = None,
    format_type: Optional[str] = None,
) -> logging.Logger:
    """
    Setup centralized logging with environment variable configuration.

    Args:
        name: Logger name (defaults to "images-avif")
        level: Log level override (defaults to env var or INFO)
        format_type: Logging format ("structured" or "simple"); overrides
            LOG_FORMAT when given

    Returns:
        Configured logger instance

    Environment Variables:
        LOG_LEVEL: Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_FORMAT: Set format type ("structured" or "simple")
    """
    logger = logging.getLogger(name)

    if level:
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        env_level = os.getenv("LOG_LEVEL", "INFO").upper()
        log_level = getattr(logging, env_level, logging.INFO)

    logger.setLevel(log_level)

    formatter = logging.Formatter(
        LOG_FORMATS[resolve_log_format(format_type)], datefmt="%Y-%m-%d %H:%M:%S"
    )

    # One handler per logger; warm starts reformat it in place
    if logger.handlers:
        for handler in logger.handlers:
            handler.setFormatter(formatter)
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Lambda installs its own root handler
    logger.propagate = False
    return logger


def get_logger(name: str = "images-avif") -> logging.Logger:
    """
    Get a logger instance with consistent configuration.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return setup_logger(name)
