from typing import (  # type: ignore[attr-defined]
    Annotated,
    Any,
    TypeAlias,
    TypeVar,
    _AnnotatedAlias,
    get_args,
    get_origin,
)

from attrmap.errors import InvalidTypeAnnotation

T = TypeVar("T")

AnnotatedType: TypeAlias = type[T] | _AnnotatedAlias


def get_type(type_: AnnotatedType) -> Any:
    origin = get_origin(type_)
    if origin is Annotated:
        type_ = get_args(type_)[0]
    return type_


def ensure_type(type_: AnnotatedType | None) -> type:
    """Normalise a type argument of a typed query into a plain class.

    Args:
        type_ (AnnotatedType | None): A class, optionally wrapped in Annotated.

    Raises:
        InvalidTypeAnnotation: If type_ is missing or cannot be matched exactly at runtime.

    Returns:
        type: The bare class.
    """
    if type_ is None:
        raise InvalidTypeAnnotation("Missing a type.")
    inner_type = get_type(type_)
    if not isinstance(inner_type, type):
        raise InvalidTypeAnnotation(
            f"Input must be a type, got {type_} of type {type(type_)}."
        )
    if get_origin(inner_type) is not None:
        # list[int] and friends pass isinstance(..., type) on some versions
        raise InvalidTypeAnnotation(
            f"Parameterised generic {type_} cannot be matched at runtime."
        )
    return inner_type


def resolve_type_name(value: Any) -> str:
    """Resolve qualified name of a value."""
    return f"{value.__module__}.{value.__qualname__}".replace(".<locals>", "")
