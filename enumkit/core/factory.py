"""
Enum factory.

Assembles previously created EnumItems into a named Enum, validates the
collection, and registers the result. Construction is all-or-nothing: any
failure leaves the registry exactly as it was.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, List, Mapping as MappingType, Optional, Sequence as SequenceType, Set

from enumkit.constants.constants import RENDER_PREFIX, RESERVED_ITEM_NAMES
from enumkit.core.enumeration import Enum
from enumkit.core.exceptions import (
    DuplicateEnum,
    DuplicateItem,
    EnumTypeMismatch,
    InvalidArgumentType,
    ReservedItemName,
)
from enumkit.core.item import EnumItem, create_item
from enumkit.core.registry import is_registered, register_enum

logger = logging.getLogger(__name__)


def _validate_items(enum_name: str, items: SequenceType[EnumItem]) -> None:
    """Check members in order; the first offending item wins."""
    seen: Set[str] = set()
    for index, item in enumerate(items):
        if item.Name in RESERVED_ITEM_NAMES:
            raise ReservedItemName(
                f"{item} (position {index}) uses reserved member name '{item.Name}'; "
                f"reserved: {sorted(RESERVED_ITEM_NAMES)}"
            )
        if item.Name in seen:
            raise DuplicateItem(
                f"{RENDER_PREFIX}.{enum_name} already has a member named '{item.Name}' "
                f"(duplicate at position {index})"
            )
        if item.EnumType != enum_name:
            raise EnumTypeMismatch(
                f"{item} (position {index}) was created for enum '{item.EnumType}', "
                f"not '{enum_name}'"
            )
        seen.add(item.Name)


def create_enum(enum_name: str, items: SequenceType[EnumItem]) -> Enum:
    """
    Build, freeze and register an Enum.

    Args:
        enum_name: Name of the new enum; must not be registered yet
        items: Ordered sequence of EnumItems created for ``enum_name``

    Returns:
        The registered Enum

    Raises:
        InvalidArgumentType: If enum_name is not a string, items is not a
            sequence, or an element is not an EnumItem
        DuplicateEnum: If enum_name is already registered
        ReservedItemName: If a member is named Name or GetEnumItems
        DuplicateItem: If two members share a name
        EnumTypeMismatch: If a member was created for another enum
    """
    if not isinstance(enum_name, str):
        raise InvalidArgumentType(f"enum_name must be a string, got {type(enum_name).__name__}")
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
        raise InvalidArgumentType(
            f"items for {RENDER_PREFIX}.{enum_name} must be a sequence of EnumItem, "
            f"got {type(items).__name__}"
        )
    for index, item in enumerate(items):
        if not isinstance(item, EnumItem):
            raise InvalidArgumentType(
                f"items[{index}] for {RENDER_PREFIX}.{enum_name} must be an EnumItem, "
                f"got {type(item).__name__}"
            )

    if is_registered(enum_name):
        raise DuplicateEnum(f"Enum '{enum_name}' is already registered")

    _validate_items(enum_name, items)

    enum = Enum(enum_name, items)
    # Repeats the duplicate check under the registry lock
    register_enum(enum)
    return enum


def create_enum_from_mapping(enum_name: str, raw_items: MappingType[str, Optional[MappingType[str, Any]]]) -> Enum:
    """
    Build an Enum straight from a ``{member_name: data}`` mapping.

    Members are created in the mapping's iteration order (insertion order for
    dict), which is the order ``GetEnumItems`` reports. A data value of None
    means the member carries no payload.

    Args:
        enum_name: Name of the new enum
        raw_items: Mapping from member name to auxiliary data

    Returns:
        The registered Enum

    Raises:
        InvalidArgumentType: If raw_items is not a mapping, plus every error of
            ``create_item`` and ``create_enum``
    """
    if not isinstance(enum_name, str):
        raise InvalidArgumentType(f"enum_name must be a string, got {type(enum_name).__name__}")
    if not isinstance(raw_items, Mapping):
        raise InvalidArgumentType(
            f"raw_items for {RENDER_PREFIX}.{enum_name} must be a mapping, got {type(raw_items).__name__}"
        )

    items: List[EnumItem] = [
        create_item(enum_name, member_name, data)
        for member_name, data in raw_items.items()
    ]
    logger.debug("Built %d items for %s.%s from mapping", len(items), RENDER_PREFIX, enum_name)
    return create_enum(enum_name, items)
