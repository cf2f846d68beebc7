"""
enumkit: immutable, identity-compared runtime enumerations.

This module provides the public API for enumkit. It re-exports the factories,
the global ``Enums`` accessor, the value types and the error classes.
"""

import logging

__version__ = "0.1.0"

# Set up basic logging configuration if none exists
def _ensure_basic_logging():
    """Ensure basic logging is configured if no configuration exists."""
    root_logger = logging.getLogger()

    # Only configure if no handlers exist and level is too high
    if not root_logger.handlers and root_logger.level > logging.INFO:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

# Configure basic logging on import
_ensure_basic_logging()

from enumkit.core.config import (
    EnumKitConfig,
    get_current_config,
    get_default_config,
    load_config,
    set_current_config,
)
from enumkit.core.enumeration import Enum
from enumkit.core.exceptions import (
    DuplicateEnum,
    DuplicateItem,
    EnumKitError,
    EnumTypeMismatch,
    ImmutabilityError,
    InvalidArgumentType,
    ReservedItemName,
    ReservedKeyError,
)
from enumkit.core.factory import create_enum, create_enum_from_mapping
from enumkit.core.item import EnumItem, create_item
from enumkit.core.log_utils import configure_logging
from enumkit.core.registry import Enums, get_enum, get_enums

__all__ = [
    # Core functions
    "create_item",
    "create_enum",
    "create_enum_from_mapping",
    "get_enum",
    "get_enums",

    # Key types
    "Enum",
    "EnumItem",
    "Enums",

    # Errors
    "EnumKitError",
    "InvalidArgumentType",
    "ReservedKeyError",
    "ReservedItemName",
    "DuplicateItem",
    "DuplicateEnum",
    "EnumTypeMismatch",
    "ImmutabilityError",

    # Configuration
    "EnumKitConfig",
    "configure_logging",
    "get_current_config",
    "get_default_config",
    "load_config",
    "set_current_config",
]
