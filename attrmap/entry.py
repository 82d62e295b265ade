"""Implementation of attribute entries.

An entry holds one key and one value whose static type is erased. The value
can only be recovered through an exact type check, and the entry decides on
its own how it compares to another entry. Entries are built by an entry
factory, which is how a map is told which equality policy to use.

Example:
    from attrmap import AttributeMap, identity_factory

    marker = object()
    first = AttributeMap(identity_factory)
    second = AttributeMap(identity_factory)
    first["marker"] = marker
    second["marker"] = marker
    print(first == second)
    #> True
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Generic, TypeAlias, TypeVar

from attrmap.errors import InvalidAttributeArgumentError
from attrmap.types import AnnotatedType, ensure_type, resolve_type_name

__all__ = [
    "AttributeEntry",
    "ValueEqualityEntry",
    "IdentityEntry",
    "PredicateEntry",
    "EntryFactory",
    "EqualityPredicate",
    "value_equality_factory",
    "identity_factory",
    "predicate_factory",
]

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True, eq=False)
class AttributeEntry(ABC, Generic[K]):
    """Entry for attribute map."""

    key: K
    value: Any = field(repr=False)

    def __post_init__(self) -> None:
        if self.key is None:
            raise InvalidAttributeArgumentError("key")
        if self.value is None:
            raise InvalidAttributeArgumentError("value")

    @property
    def value_type(self) -> type:
        """The concrete type of the stored value."""
        return type(self.value)

    def is_value_of_type(self, type_: AnnotatedType[V]) -> bool:
        """Check the type of the stored value.

        Args:
            type_ (AnnotatedType[V]): The type to test against.

        Returns:
            bool: True if the value is exactly of type_; subclasses do not match.
        """
        return self.value_type is ensure_type(type_)

    def try_get_value(self, type_: AnnotatedType[V]) -> V | None:
        """Get the value if it is exactly of type_.

        Args:
            type_ (AnnotatedType[V]): The expected type of the value.

        Returns:
            V | None: The value, or None on type mismatch.
        """
        if self.is_value_of_type(type_):
            return self.value
        return None

    @abstractmethod
    def equals_entry(self, other: "AttributeEntry[K]") -> bool:
        """Compare with another entry using this entry's equality policy.

        Args:
            other (AttributeEntry[K]): The entry to compare with.

        Returns:
            bool: True if both entries are considered equal.
        """
        raise NotImplementedError()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, type={resolve_type_name(self.value_type)}, value={self.value!r})"


@dataclass(frozen=True, eq=False, repr=False)
class ValueEqualityEntry(AttributeEntry[K]):
    """Equal when keys match, value types are identical and values compare equal."""

    def equals_entry(self, other: AttributeEntry[K]) -> bool:
        if not isinstance(other, AttributeEntry):
            return False
        return (
            self.key == other.key
            and self.value_type is other.value_type
            and self.value == other.value
        )


@dataclass(frozen=True, eq=False, repr=False)
class IdentityEntry(AttributeEntry[K]):
    """Equal when keys match and both entries hold the very same object."""

    def equals_entry(self, other: AttributeEntry[K]) -> bool:
        if not isinstance(other, AttributeEntry):
            return False
        return self.key == other.key and self.value is other.value


EqualityPredicate: TypeAlias = Callable[[Any, Any], bool]


@dataclass(frozen=True, eq=False, repr=False)
class PredicateEntry(AttributeEntry[K]):
    """Equal when keys match and the predicate accepts both values."""

    predicate: EqualityPredicate = field(kw_only=True)

    def equals_entry(self, other: AttributeEntry[K]) -> bool:
        if not isinstance(other, AttributeEntry):
            return False
        return self.key == other.key and bool(
            self.predicate(self.value, other.value)
        )


EntryFactory: TypeAlias = Callable[[K, Any], AttributeEntry[K]]


def value_equality_factory(key: K, value: Any) -> AttributeEntry[K]:
    """Create entries comparing by value equality."""
    return ValueEqualityEntry(key, value)


def identity_factory(key: K, value: Any) -> AttributeEntry[K]:
    """Create entries comparing by object identity."""
    return IdentityEntry(key, value)


def predicate_factory(predicate: EqualityPredicate) -> EntryFactory:
    """Create an entry factory with a custom equality predicate.

    Args:
        predicate (EqualityPredicate): Called as predicate(value, other_value).

    Returns:
        EntryFactory: Factory creating PredicateEntry instances.
    """
    if not callable(predicate):
        raise InvalidAttributeArgumentError(
            "predicate", f"Predicate must be callable, got {predicate!r}"
        )
    return partial(PredicateEntry, predicate=predicate)
