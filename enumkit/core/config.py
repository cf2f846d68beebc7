"""
Global configuration for enumkit.

Configuration is an immutable dataclass provided as a Python object. A
process-wide current configuration is held here; it can be replaced with
``set_current_config`` or loaded from a YAML file with ``load_config``.
"""

import dataclasses
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from enumkit.constants.constants import (
    DEFAULT_CONFIG_DIR_NAME,
    DEFAULT_CONFIG_FILE_NAME,
    DEFAULT_LOG_LEVEL,
    ENV_CONFIG_FILE,
    ENV_LOG_LEVEL,
    ENV_THREAD_SAFE,
)
from enumkit.core.exceptions import InvalidArgumentType

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _log_level_from_env() -> str:
    """Read ENUMKIT_LOG_LEVEL, falling back to the default on unknown levels."""
    level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    if level not in _VALID_LOG_LEVELS:
        logger.warning(
            "Ignoring %s=%r: not one of %s. Using %s.",
            ENV_LOG_LEVEL, level, sorted(_VALID_LOG_LEVELS), DEFAULT_LOG_LEVEL,
        )
        return DEFAULT_LOG_LEVEL
    return level


@dataclass(frozen=True)
class EnumKitConfig:
    """Runtime behaviour of the enum registry and its logging."""

    log_level: str = field(default_factory=_log_level_from_env)
    """Level applied to the ``enumkit`` logger. Reads from ENUMKIT_LOG_LEVEL."""

    log_registrations: bool = True
    """Log successful enum registration at INFO instead of DEBUG."""

    thread_safe: bool = field(default_factory=lambda: os.getenv(ENV_THREAD_SAFE, 'true').lower() == 'true')
    """Guard registry writes with a lock. Reads from ENUMKIT_THREAD_SAFE."""

    def __post_init__(self):
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _VALID_LOG_LEVELS:
            raise InvalidArgumentType(
                f"log_level must be one of {sorted(_VALID_LOG_LEVELS)}, got {self.log_level!r}"
            )
        # Normalise case without breaking frozen semantics
        object.__setattr__(self, "log_level", self.log_level.upper())
        if not isinstance(self.log_registrations, bool):
            raise InvalidArgumentType(f"log_registrations must be a bool, got {self.log_registrations!r}")
        if not isinstance(self.thread_safe, bool):
            raise InvalidArgumentType(f"thread_safe must be a bool, got {self.thread_safe!r}")


# --- Default / current configuration ---

_config_lock = threading.Lock()
_current_config: Optional[EnumKitConfig] = None


def get_default_config() -> EnumKitConfig:
    """Provide a default EnumKitConfig built from the environment."""
    return EnumKitConfig()


def get_current_config() -> EnumKitConfig:
    """Return the active configuration, creating the default on first use."""
    global _current_config
    with _config_lock:
        if _current_config is None:
            _current_config = get_default_config()
        return _current_config


def set_current_config(config: EnumKitConfig) -> None:
    """
    Replace the active configuration.

    Raises:
        InvalidArgumentType: If ``config`` is not an EnumKitConfig
    """
    global _current_config
    if not isinstance(config, EnumKitConfig):
        raise InvalidArgumentType(f"Expected EnumKitConfig, got {type(config).__name__}")
    with _config_lock:
        _current_config = config
    logger.debug("Active enumkit configuration replaced: %s", config)


# --- YAML loading ---

def default_config_path() -> Path:
    """Location of the per-user config file."""
    return Path.home() / ".config" / DEFAULT_CONFIG_DIR_NAME / DEFAULT_CONFIG_FILE_NAME


def load_config(path: Optional[Union[str, Path]] = None) -> EnumKitConfig:
    """
    Load configuration from a YAML file.

    The file is taken from ``path``, else from ENUMKIT_CONFIG_FILE, else from
    ``~/.config/enumkit/config.yaml``. Any problem with the file (missing,
    unparsable, wrong shape, unknown or mistyped fields) is logged and the
    defaults are returned instead.

    Args:
        path: Optional explicit path to the YAML file

    Returns:
        The loaded configuration, or the defaults
    """
    if path is None:
        env_path = os.getenv(ENV_CONFIG_FILE)
        config_file = Path(env_path) if env_path else default_config_path()
    else:
        config_file = Path(path)

    if not config_file.exists():
        logger.debug("No enumkit config file at %s; using defaults.", config_file)
        return get_default_config()

    logger.info("Attempting to load enumkit configuration from %s", config_file)
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            loaded_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning("Error parsing YAML from %s: %s. Using default config.", config_file, e)
        return get_default_config()
    except OSError as e:
        logger.warning("Cannot read config file %s: %s. Using default config.", config_file, e)
        return get_default_config()

    if not loaded_data or not isinstance(loaded_data, dict):
        logger.warning("Config file %s is empty or not a valid structure. Using default config.", config_file)
        return get_default_config()

    try:
        return _construct_config_from_data(loaded_data)
    except TypeError as e:
        # Unknown fields and InvalidArgumentType both land here
        logger.warning("Error constructing EnumKitConfig from %s: %s. Using default config.", config_file, e)
        return get_default_config()


def _construct_config_from_data(loaded_data: Dict[str, Any]) -> EnumKitConfig:
    """Merge loaded values over the defaults."""
    defaults = dataclasses.asdict(get_default_config())
    config = EnumKitConfig(**{**defaults, **loaded_data})
    logger.info("Successfully loaded user-defined enumkit configuration.")
    return config
