"""
Logging utility for the dataset compliance metadata package.

Module loggers are created with logging.getLogger(__name__) and propagate to
the package logger configured here.
"""
import logging
import sys
from typing import Optional

from dataset_compliance.config.settings import Settings, settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_log_level(level: Optional[str] = None, config: Optional[Settings] = None) -> int:
    """
    Resolve the numeric logging level.

    An explicit level wins; otherwise DEBUG mode forces debug logging and
    LOG_LEVEL applies.

    Args:
        level: Level name overriding the settings
        config: Settings to read DEBUG / LOG_LEVEL from (defaults to the global settings)

    Returns:
        Numeric logging level
    """
    config = config or settings
    if level is None:
        level = "DEBUG" if config.DEBUG else config.LOG_LEVEL
    return getattr(logging, level.upper())


def setup_logger(name: str = "dataset_compliance", level: Optional[str] = None) -> logging.Logger:
    """
    Set up and configure logger.

    Args:
        name: Name of the logger
        level: Logging level (overrides settings.DEBUG and settings.LOG_LEVEL if provided)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    log_level = resolve_log_level(level)
    logger.setLevel(log_level)

    # Reuse the existing handler, only refreshing its level
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


# Package logger; module loggers propagate to it
logger = setup_logger()
