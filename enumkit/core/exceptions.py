"""
Custom exceptions for enumkit.

Every error is a programmer error raised synchronously by the factories; they
abort the whole call and leave the enum registry untouched. Each class also
derives from the closest builtin so callers can catch ``TypeError`` or
``ValueError`` without importing enumkit.
"""

class EnumKitError(Exception):
    """Base class for all enumkit custom exceptions."""
    pass

class InvalidArgumentType(EnumKitError, TypeError):
    """Raised when a public operation receives the wrong kind of value."""
    pass

class ReservedKeyError(EnumKitError, ValueError):
    """Raised when auxiliary item data uses a reserved key (Name, EnumType)."""
    pass

class ReservedItemName(EnumKitError, ValueError):
    """Raised when a member name collides with the Enum's own surface."""
    pass

class DuplicateItem(EnumKitError, ValueError):
    """Raised when two members of one enum share a name."""
    pass

class DuplicateEnum(EnumKitError, ValueError):
    """Raised when an enum name is already present in the registry."""
    pass

class EnumTypeMismatch(EnumKitError, ValueError):
    """Raised when an item was created for a different enum than the one being assembled."""
    pass

class ImmutabilityError(EnumKitError, AttributeError):
    """Raised when an attempt is made to modify an immutable object after initialization."""
    pass
