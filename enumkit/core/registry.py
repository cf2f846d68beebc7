"""
Enum registry for enumkit.

The registry is a process-wide singleton mapping enum names to Enum values.
Each name can be written once; the only writer is ``create_enum``. Readers get
either a single Enum by name or a shallow copy of the whole mapping, never the
internal dict itself.

Thread Safety:
    Writes are check-then-insert under ``_registry_lock`` so two concurrent
    registrations of one name cannot both succeed. The lock can be disabled
    through ``EnumKitConfig.thread_safe`` for single-threaded embedding.
"""

import contextlib
import logging
import threading
from typing import Dict, Iterator, Optional

from enumkit.core.config import get_current_config
from enumkit.core.enumeration import Enum
from enumkit.core.exceptions import DuplicateEnum, ImmutabilityError, InvalidArgumentType
from enumkit.core.log_utils import registration_log_level

logger = logging.getLogger(__name__)

# Thread-safe lock for registry access
_registry_lock = threading.Lock()

# Global registry of enums by name
ENUM_REGISTRY: Dict[str, Enum] = {}


def _write_guard():
    if get_current_config().thread_safe:
        return _registry_lock
    return contextlib.nullcontext()


def is_registered(name: str) -> bool:
    """Check whether an enum name is taken."""
    return name in ENUM_REGISTRY


def register_enum(enum: Enum) -> None:
    """
    Publish a fully built Enum under its name.

    Args:
        enum: The enum to register

    Raises:
        InvalidArgumentType: If ``enum`` is not an Enum
        DuplicateEnum: If the name is already registered
    """
    if not isinstance(enum, Enum):
        raise InvalidArgumentType(f"Only Enum values can be registered, got {type(enum).__name__}")

    with _write_guard():
        if enum.Name in ENUM_REGISTRY:
            raise DuplicateEnum(f"Enum '{enum.Name}' is already registered")
        ENUM_REGISTRY[enum.Name] = enum

    logger.log(registration_log_level(), "Registered %s with %d items", enum, len(enum))


def get_enum(name: str) -> Optional[Enum]:
    """Return the Enum registered under ``name``, or None."""
    return ENUM_REGISTRY.get(name)


def get_enums() -> Dict[str, Enum]:
    """Return an independent shallow copy of the registry."""
    with _write_guard():
        return dict(ENUM_REGISTRY)


def _clear_registry() -> None:
    """Drop every registered enum. Test isolation only; not part of the public API."""
    with _registry_lock:
        ENUM_REGISTRY.clear()
    logger.debug("Enum registry cleared")


class EnumIndex:
    """
    Read-only global accessor over the registry.

    ``Enums.Color`` and ``Enums["Color"]`` both return the registered Enum or
    None. ``Enums.GetEnums()`` returns a snapshot dict.
    """

    __slots__ = ()

    def GetEnums(self) -> Dict[str, Enum]:
        return get_enums()

    def __getitem__(self, name: str) -> Optional[Enum]:
        return get_enum(name)

    def __getattr__(self, name: str) -> Optional[Enum]:
        if name.startswith("_"):
            raise AttributeError(name)
        return get_enum(name)

    def __contains__(self, name: str) -> bool:
        return is_registered(name)

    def __iter__(self) -> Iterator[str]:
        return iter(get_enums())

    def __len__(self) -> int:
        return len(ENUM_REGISTRY)

    def __setattr__(self, name, value):
        raise ImmutabilityError("The enum index is read-only; use create_enum to add enums")

    def __setitem__(self, name, value):
        raise ImmutabilityError("The enum index is read-only; use create_enum to add enums")

    def __delattr__(self, name):
        raise ImmutabilityError("Registered enums cannot be removed")

    def __delitem__(self, name):
        raise ImmutabilityError("Registered enums cannot be removed")

    def __repr__(self):
        return f"<EnumIndex {sorted(ENUM_REGISTRY)}>"


# Global accessor instance
Enums = EnumIndex()
