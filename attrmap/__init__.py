"""Attrmap, typed attributes with pluggable equality."""

__version__ = "0.1.0"


from .container import AttributeMap, BaseAttributeMap, KeyAttributePair
from .entry import (
    AttributeEntry,
    EntryFactory,
    IdentityEntry,
    PredicateEntry,
    ValueEqualityEntry,
    identity_factory,
    predicate_factory,
    value_equality_factory,
)
from .errors import (
    AttributeAlreadyExistsError,
    AttributeMapError,
    AttributeNotFoundError,
    InvalidAttributeArgumentError,
    InvalidTypeAnnotation,
)

__all__ = [
    "AttributeMap",
    "BaseAttributeMap",
    "KeyAttributePair",
    "AttributeEntry",
    "ValueEqualityEntry",
    "IdentityEntry",
    "PredicateEntry",
    "EntryFactory",
    "value_equality_factory",
    "identity_factory",
    "predicate_factory",
    "AttributeMapError",
    "InvalidAttributeArgumentError",
    "AttributeAlreadyExistsError",
    "AttributeNotFoundError",
    "InvalidTypeAnnotation",
]
