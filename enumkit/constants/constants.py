"""
Consolidated constants for enumkit.

This module defines the reserved names that make up the public surface of
enum items and enums, the rendering prefix, and the environment variables
read by the configuration layer.
"""

from typing import FrozenSet

# Field names every EnumItem carries; caller data may not reuse them
ENUM_KEY_NAME = "Name"
ENUM_KEY_ENUM_TYPE = "EnumType"
RESERVED_ITEM_KEYS: FrozenSet[str] = frozenset({ENUM_KEY_NAME, ENUM_KEY_ENUM_TYPE})

# Member names that would shadow an Enum's own surface
ENUM_METHOD_GET_ENUM_ITEMS = "GetEnumItems"
RESERVED_ITEM_NAMES: FrozenSet[str] = frozenset({ENUM_KEY_NAME, ENUM_METHOD_GET_ENUM_ITEMS})

# Rendering: Enum.<Name> and Enum.<EnumType>.<Name>
RENDER_PREFIX = "Enum"

# Configuration environment variables
ENV_CONFIG_FILE = "ENUMKIT_CONFIG_FILE"
ENV_LOG_LEVEL = "ENUMKIT_LOG_LEVEL"
ENV_THREAD_SAFE = "ENUMKIT_THREAD_SAFE"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CONFIG_DIR_NAME = "enumkit"
DEFAULT_CONFIG_FILE_NAME = "config.yaml"
