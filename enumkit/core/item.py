"""
Enum items: the individual members of an enumeration.

An EnumItem combines a member name, the name of the enum it belongs to, and an
optional read-only payload. Items are frozen once built and compare by
identity token, never by field contents.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator, Mapping as MappingType, Optional

from enumkit.constants.constants import (
    ENUM_KEY_ENUM_TYPE,
    ENUM_KEY_NAME,
    RENDER_PREFIX,
    RESERVED_ITEM_KEYS,
)
from enumkit.core.exceptions import ImmutabilityError, InvalidArgumentType, ReservedKeyError
from enumkit.core.identity import new_token

logger = logging.getLogger(__name__)


class EnumItem:
    """
    A single immutable enum member.

    Fields:
        Name: Member identifier, unique within the owning enum
        EnumType: Name of the owning enum
        data: Read-only view of the auxiliary payload

    Payload keys are also readable as attributes when they do not clash with
    the names above or with ``get`` and ``keys``, and always through
    ``item[key]``.
    """

    __slots__ = ("_name", "_enum_type", "_data", "_token")

    def __init__(self, enum_type: str, name: str, data: Optional[MappingType[str, Any]] = None):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_enum_type", enum_type)
        object.__setattr__(self, "_data", MappingProxyType(dict(data or {})))
        object.__setattr__(self, "_token", new_token())

    @property
    def Name(self) -> str:
        return self._name

    @property
    def EnumType(self) -> str:
        return self._enum_type

    @property
    def data(self) -> MappingType[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a field or payload value, returning ``default`` when absent."""
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> Iterator[str]:
        """All field names: Name, EnumType, then payload keys."""
        yield ENUM_KEY_NAME
        yield ENUM_KEY_ENUM_TYPE
        yield from self._data

    def __getitem__(self, key: str) -> Any:
        if key == ENUM_KEY_NAME:
            return self._name
        if key == ENUM_KEY_ENUM_TYPE:
            return self._enum_type
        return self._data[key]

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        data = object.__getattribute__(self, "_data")
        try:
            return data[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} {self} has no field '{name}'"
            ) from None

    def __setattr__(self, name, value):
        raise ImmutabilityError(f"Cannot set '{name}' on {self}: enum items are immutable")

    def __delattr__(self, name):
        raise ImmutabilityError(f"Cannot delete '{name}' from {self}: enum items are immutable")

    def __eq__(self, other):
        if not isinstance(other, EnumItem):
            return NotImplemented
        return self._token == other._token

    def __hash__(self):
        return hash(self._token)

    # Duplicating a reference must not mint a new identity
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __dir__(self):
        return sorted(set(super().__dir__()) | {k for k in self._data if isinstance(k, str)})

    def __str__(self):
        return f"{RENDER_PREFIX}.{self._enum_type}.{self._name}"

    def __repr__(self):
        return f"<EnumItem {self}>"


def create_item(enum_type: str, name: str, data: Optional[MappingType[str, Any]] = None) -> EnumItem:
    """
    Create a single immutable enum member.

    Args:
        enum_type: Name of the enum the item will belong to
        name: Member identifier
        data: Optional mapping of auxiliary attributes; shallow-copied

    Returns:
        A new frozen EnumItem with a fresh identity

    Raises:
        InvalidArgumentType: If enum_type/name are not strings, enum_type is
            empty, or data is not a mapping
        ReservedKeyError: If data uses the keys Name or EnumType
    """
    if not isinstance(enum_type, str):
        raise InvalidArgumentType(f"enum_type must be a string, got {type(enum_type).__name__}")
    if not enum_type:
        raise InvalidArgumentType("enum_type must be a non-empty string")
    if not isinstance(name, str):
        raise InvalidArgumentType(f"name must be a string, got {type(name).__name__}")
    if data is not None and not isinstance(data, Mapping):
        raise InvalidArgumentType(
            f"data for {RENDER_PREFIX}.{enum_type}.{name} must be a mapping, got {type(data).__name__}"
        )

    if data:
        reserved = sorted(RESERVED_ITEM_KEYS.intersection(k for k in data if isinstance(k, str)))
        if reserved:
            raise ReservedKeyError(
                f"data for {RENDER_PREFIX}.{enum_type}.{name} uses reserved key(s) {reserved}"
            )

    item = EnumItem(enum_type, name, data)
    logger.debug("Created enum item %s", item)
    return item
