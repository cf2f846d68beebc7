"""Core module for enumkit."""

# These imports are re-exported through __all__
from enumkit.core.enumeration import Enum
from enumkit.core.factory import create_enum, create_enum_from_mapping
from enumkit.core.item import EnumItem, create_item
from enumkit.core.registry import Enums, get_enum, get_enums

__all__ = [
    'Enum',
    'EnumItem',
    'Enums',
    'create_enum',
    'create_enum_from_mapping',
    'create_item',
    'get_enum',
    'get_enums',
]
