"""
Enumeration types: closed, named, immutable collections of EnumItems.

Instances are produced by ``enumkit.core.factory.create_enum``, which validates
the members and publishes the result to the registry. Construction here does
no validation of its own.
"""

from typing import Any, Dict, Iterator, List, Sequence

from enumkit.constants.constants import RENDER_PREFIX
from enumkit.core.exceptions import ImmutabilityError
from enumkit.core.identity import new_token
from enumkit.core.item import EnumItem


class Enum:
    """
    A named enumeration.

    Members are reachable as attributes (``Color.Red``), by subscript
    (``Color["Red"]``) and through ``GetEnumItems()``, which returns a fresh
    list in construction order on every call.

    The public surface is exactly ``Name`` and ``GetEnumItems``, the reserved
    member names. Any other public attribute would shadow a member.
    """

    __slots__ = ("_name", "_members", "_items", "_token")

    def __init__(self, name: str, items: Sequence[EnumItem]):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_items", tuple(items))
        object.__setattr__(self, "_members", {item.Name: item for item in self._items})
        object.__setattr__(self, "_token", new_token())

    @property
    def Name(self) -> str:
        return self._name

    def GetEnumItems(self) -> List[EnumItem]:
        """Return every member as a new list; changing it does not affect the enum."""
        return list(self._items)

    def __getitem__(self, name: str) -> EnumItem:
        try:
            return self._members[name]
        except KeyError:
            raise KeyError(f"{self} has no member '{name}'") from None

    def __getattr__(self, name: str) -> EnumItem:
        if name.startswith("_"):
            raise AttributeError(name)
        members: Dict[str, EnumItem] = object.__getattribute__(self, "_members")
        try:
            return members[name]
        except KeyError:
            raise AttributeError(f"{self} has no member '{name}'") from None

    def __contains__(self, value: Any) -> bool:
        if isinstance(value, EnumItem):
            return self._members.get(value.Name) == value
        if isinstance(value, str):
            return value in self._members
        return False

    def __iter__(self) -> Iterator[EnumItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __setattr__(self, name, value):
        raise ImmutabilityError(f"Cannot set '{name}' on {self}: enums are immutable")

    def __delattr__(self, name):
        raise ImmutabilityError(f"Cannot delete '{name}' from {self}: enums are immutable")

    def __eq__(self, other):
        if not isinstance(other, Enum):
            return NotImplemented
        return self._token == other._token

    def __hash__(self):
        return hash(self._token)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._members))

    def __str__(self):
        return f"{RENDER_PREFIX}.{self._name}"

    def __repr__(self):
        return f"<Enum {self} ({len(self._items)} items)>"
