"""Constants shared across enumkit."""

from enumkit.constants.constants import (
    ENV_CONFIG_FILE,
    ENV_LOG_LEVEL,
    ENV_THREAD_SAFE,
    ENUM_KEY_ENUM_TYPE,
    ENUM_KEY_NAME,
    RENDER_PREFIX,
    RESERVED_ITEM_KEYS,
    RESERVED_ITEM_NAMES,
)

__all__ = [
    "ENV_CONFIG_FILE",
    "ENV_LOG_LEVEL",
    "ENV_THREAD_SAFE",
    "ENUM_KEY_ENUM_TYPE",
    "ENUM_KEY_NAME",
    "RENDER_PREFIX",
    "RESERVED_ITEM_KEYS",
    "RESERVED_ITEM_NAMES",
]
