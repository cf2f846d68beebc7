"""
Opaque identity tokens.

Each EnumItem and Enum is stamped with an IdentityToken at construction.
Tokens compare by object identity only, so two values are equal exactly when
they were produced by the same construction, no matter how many references to
them exist.

Thread Safety:
    Serial numbers come from a shared counter guarded by a lock, so tokens
    minted concurrently never share a serial.
"""

import itertools
import threading

_serial_lock = threading.Lock()
_serial_counter = itertools.count(1)


class IdentityToken:
    """Unforgeable per-instance marker. Equality is ``is``."""

    __slots__ = ("_serial",)

    def __init__(self) -> None:
        with _serial_lock:
            serial = next(_serial_counter)
        object.__setattr__(self, "_serial", serial)

    @property
    def serial(self) -> int:
        return self._serial

    def __setattr__(self, name, value):
        raise AttributeError("IdentityToken is immutable")

    def __delattr__(self, name):
        raise AttributeError("IdentityToken is immutable")

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    def __hash__(self):
        return hash(self._serial)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return f"<IdentityToken #{self._serial}>"


def new_token() -> IdentityToken:
    """Mint a fresh identity token."""
    return IdentityToken()
