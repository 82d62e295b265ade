"""Module containing errors classes."""

from typing import Any


class AttributeMapError(Exception):
    """Base class for all attribute map related errors."""

    pass


class InvalidAttributeArgumentError(AttributeMapError, ValueError):
    """Raised when a key or value is missing or otherwise unusable."""

    def __init__(self, argument: str, msg: str | None = None) -> None:
        self.argument = argument
        super().__init__(msg or f"Argument {argument!r} must not be None")


class AttributeAlreadyExistsError(AttributeMapError):
    """Raised when adding an attribute under a key that is already taken."""

    def __init__(self, key: Any, to_add: Any, existing: Any) -> None:
        self.key = key
        self.to_add = to_add
        self.existing = existing
        super().__init__(
            f"New attribute '{to_add}' with key {key!r} is conflicting with currently existing attribute '{existing}'"
        )


class AttributeNotFoundError(AttributeMapError, KeyError):
    """Raised when an attribute with a specific key is not found."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Attribute with key {key!r} not found")

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidTypeAnnotation(TypeError):
    """Raised for invalid type annotation."""

    pass
