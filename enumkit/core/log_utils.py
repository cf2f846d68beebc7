"""
Core log utilities for enumkit.

Applies the configured log level to the package logger. Records are handed to
whatever handlers the host application installed; the package root only adds a
console handler when nothing is configured at all.
"""

import logging
from typing import Optional

from enumkit.core.config import EnumKitConfig, get_current_config

PACKAGE_LOGGER_NAME = "enumkit"

logger = logging.getLogger(__name__)


def configure_logging(config: Optional[EnumKitConfig] = None) -> logging.Logger:
    """
    Set the ``enumkit`` logger level from configuration.

    Args:
        config: Configuration to apply (defaults to the current configuration)

    Returns:
        The package logger
    """
    config = config or get_current_config()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(config.log_level)
    logger.debug("enumkit log level set to %s", config.log_level)
    return package_logger


def registration_log_level(config: Optional[EnumKitConfig] = None) -> int:
    """Level used when reporting a successful enum registration."""
    config = config or get_current_config()
    return logging.INFO if config.log_registrations else logging.DEBUG
