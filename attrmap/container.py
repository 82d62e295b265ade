"""Implementation of the attribute map."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, NamedTuple, TypeVar

from attrmap.entry import AttributeEntry, EntryFactory
from attrmap.errors import (
    AttributeAlreadyExistsError,
    AttributeNotFoundError,
    InvalidAttributeArgumentError,
)
from attrmap.types import AnnotatedType, ensure_type

__all__ = [
    "BaseAttributeMap",
    "AttributeMap",
    "KeyAttributePair",
]

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class KeyAttributePair(NamedTuple):
    """Result of a typed lookup keeping the requested key."""

    found: bool
    key: Any
    value: Any


class BaseAttributeMap(ABC, Generic[K]):
    """Base class for attribute maps."""

    @property
    @abstractmethod
    def attributes(self) -> Mapping[K, AttributeEntry[K]]:
        """Read-only view of the stored entries by key."""
        raise NotImplementedError()

    @abstractmethod
    def add(self, key: K, value: Any) -> None:
        """Add an attribute. The key must not exist yet.

        Args:
            key (K): The key of the attribute.
            value (Any): The value of the attribute.

        Raises:
            InvalidAttributeArgumentError: If key or value is None.
            AttributeAlreadyExistsError: If an attribute with key already exists.
        """
        raise NotImplementedError()

    @abstractmethod
    def set(self, key: K, value: Any) -> None:
        """Add an attribute or replace the existing one with the same key.

        Args:
            key (K): The key of the attribute.
            value (Any): The value of the attribute.

        Raises:
            InvalidAttributeArgumentError: If key or value is None.
        """
        raise NotImplementedError()

    @abstractmethod
    def remove(self, key: K) -> None:
        """Remove an attribute by its key.

        Args:
            key (K): The key of the attribute.

        Raises:
            AttributeNotFoundError: If no attribute was removed.
        """
        raise NotImplementedError()

    @abstractmethod
    def has_attribute(self, key: K) -> bool:
        """Check if an attribute with key exists. None and unhashable keys never exist."""
        raise NotImplementedError()

    @abstractmethod
    def get(self, key: K) -> Any:
        """Get the raw value of an attribute.

        Args:
            key (K): The key of the attribute.

        Raises:
            AttributeNotFoundError: If the attribute does not exist.

        Returns:
            Any: The stored value.
        """
        raise NotImplementedError()

    @abstractmethod
    def try_get_attribute(self, key: K, type_: AnnotatedType[V]) -> V | None:
        """Get the value of an attribute if it is exactly of type_.

        Args:
            key (K): The key of the attribute.
            type_ (AnnotatedType[V]): The expected type of the value.

        Returns:
            V | None: The value; None if the key is missing or the type does not match.

        Raises:
            InvalidTypeAnnotation: If type_ cannot be matched exactly, even when key is missing.
        """
        raise NotImplementedError()

    @abstractmethod
    def has_attribute_of_type(self, type_: AnnotatedType[V]) -> K | None:
        """Find a key whose value is exactly of type_.

        Which key is returned when several match is not defined.

        Args:
            type_ (AnnotatedType[V]): The type to look for.

        Returns:
            K | None: A matching key, or None if there is none.
        """
        raise NotImplementedError()

    @abstractmethod
    def keys_of_type(self, type_: AnnotatedType[V]) -> tuple[K, ...]:
        """Get all keys whose value is exactly of type_."""
        raise NotImplementedError()

    @abstractmethod
    def get_key_attribute_pair(
        self, key: K, type_: AnnotatedType[V]
    ) -> KeyAttributePair:
        """Look up an attribute and report the outcome with the key.

        Args:
            key (K): The key of the attribute.
            type_ (AnnotatedType[V]): The expected type of the value.

        Returns:
            KeyAttributePair: (True, key, value or None on type mismatch) if the
                key exists; otherwise (False, key, None).

        Raises:
            InvalidTypeAnnotation: If type_ cannot be matched exactly, even when key is missing.
        """
        raise NotImplementedError()

    @abstractmethod
    def count(self) -> int:
        """Number of stored attributes."""
        raise NotImplementedError()

    @abstractmethod
    def update(self, attributes: Mapping[K, Any] | Iterable[tuple[K, Any]]) -> None:
        """Set many attributes at once.

        Every entry is created before any is stored, so a rejected pair leaves
        the map untouched.

        Args:
            attributes (Mapping[K, Any] | Iterable[tuple[K, Any]]): The pairs to set.

        Raises:
            InvalidAttributeArgumentError: If any key or value is None.
        """
        raise NotImplementedError()

    def equals_container(self, other: "BaseAttributeMap[K]") -> bool:
        """Compare two maps entry by entry.

        Both maps must hold the same keys, and every entry of this map must
        consider the entry with the same key in other equal.

        Args:
            other (BaseAttributeMap[K]): The map to compare with.

        Returns:
            bool: True if the maps are equal.
        """
        if other is self:
            return True
        if not isinstance(other, BaseAttributeMap):
            return False
        if self.count() != other.count():
            return False
        others = other.attributes
        for key, entry in self.attributes.items():
            other_entry = others.get(key)
            if other_entry is None or not entry.equals_entry(other_entry):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BaseAttributeMap):
            return self.equals_container(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, key: object) -> bool:
        return self.has_attribute(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.count()

    def keys(self) -> tuple[K, ...]:
        """Keys of all stored attributes."""
        return tuple(self.attributes)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __getitem__(self, key: K) -> Any:
        return self.get(key)

    def __setitem__(self, key: K, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        self.remove(key)


class AttributeMap(BaseAttributeMap[K]):
    """Attribute map storing one entry per key.

    Entries are created by the entry factory given at construction, which
    also decides how entries, and therefore whole maps, compare.
    """

    __slots__ = (
        "_name",
        "_entries",
        "_factory",
    )

    _entries: dict[K, AttributeEntry[K]]

    def __init__(
        self,
        factory: EntryFactory[K],
        name: str | None = None,
    ) -> None:
        if factory is None or not callable(factory):
            raise InvalidAttributeArgumentError(
                "factory", f"Entry factory must be callable, got {factory!r}"
            )
        self._factory = factory
        self._name = name or hex(id(self))
        self._entries = {}

    def __str__(self) -> str:
        return f"attribute_map::{self._name}"

    def __repr__(self) -> str:
        entries = ", ".join(repr(entry) for entry in self._entries.values())
        return f"AttributeMap(name={self._name!r}, entries=[{entries}])"

    @property
    def factory(self) -> EntryFactory[K]:
        """The entry factory used for every insertion."""
        return self._factory

    @property
    def attributes(self) -> Mapping[K, AttributeEntry[K]]:
        return MappingProxyType(self._entries)

    @staticmethod
    def _check_arguments(key: K, value: Any) -> None:
        if key is None:
            raise InvalidAttributeArgumentError("key")
        if value is None:
            raise InvalidAttributeArgumentError("value")

    def _create_entry(self, key: K, value: Any) -> AttributeEntry[K]:
        self._check_arguments(key, value)
        entry = self._factory(key, value)
        if entry.key != key:
            raise InvalidAttributeArgumentError(
                "factory",
                f"Entry factory returned an entry with key {entry.key!r} for key {key!r}",
            )
        return entry

    def add(self, key: K, value: Any) -> None:
        """Add an attribute. The key must not exist yet.

        Raises:
            InvalidAttributeArgumentError: If key or value is None.
            AttributeAlreadyExistsError: If an attribute with key already exists.
        """
        self._check_arguments(key, value)
        if key in self._entries:
            raise AttributeAlreadyExistsError(
                key, value, self._entries[key].value
            )
        entry = self._create_entry(key, value)
        self._entries[key] = entry
        logger.debug("Added %r to %s", entry, self)

    def set(self, key: K, value: Any) -> None:
        entry = self._create_entry(key, value)
        replaced = self._entries.get(key)
        self._entries[key] = entry
        if replaced is None:
            logger.debug("Added %r to %s", entry, self)
        else:
            logger.debug("Replaced %r with %r in %s", replaced, entry, self)

    def update(self, attributes: Mapping[K, Any] | Iterable[tuple[K, Any]]) -> None:
        pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
        entries = [self._create_entry(key, value) for key, value in pairs]
        for entry in entries:
            self._entries[entry.key] = entry
        logger.debug("Set %d attributes in %s", len(entries), self)

    def remove(self, key: K) -> None:
        try:
            entry = self._entries.pop(key)
        except KeyError:
            raise AttributeNotFoundError(key)
        logger.debug("Removed %r from %s", entry, self)

    def _find_entry(self, key: K) -> AttributeEntry[K] | None:
        try:
            return self._entries.get(key)
        except TypeError:
            # unhashable keys can never be stored
            return None

    def has_attribute(self, key: K) -> bool:
        return key is not None and self._find_entry(key) is not None

    def get(self, key: K) -> Any:
        try:
            return self._entries[key].value
        except KeyError:
            raise AttributeNotFoundError(key)

    def try_get_attribute(self, key: K, type_: AnnotatedType[V]) -> V | None:
        type_ = ensure_type(type_)
        entry = self._find_entry(key)
        if entry is None:
            return None
        return entry.try_get_value(type_)

    def has_attribute_of_type(self, type_: AnnotatedType[V]) -> K | None:
        type_ = ensure_type(type_)
        for key, entry in self._entries.items():
            if entry.is_value_of_type(type_):
                return key
        return None

    def keys_of_type(self, type_: AnnotatedType[V]) -> tuple[K, ...]:
        type_ = ensure_type(type_)
        return tuple(
            key
            for key, entry in self._entries.items()
            if entry.is_value_of_type(type_)
        )

    def get_key_attribute_pair(
        self, key: K, type_: AnnotatedType[V]
    ) -> KeyAttributePair:
        type_ = ensure_type(type_)
        entry = self._find_entry(key)
        if entry is None:
            return KeyAttributePair(False, key, None)
        return KeyAttributePair(True, key, entry.try_get_value(type_))

    def count(self) -> int:
        return len(self._entries)
