# topmark:header:start
#
#   project      : SnapText
#   file         : sorting.py
#   file_relpath : src/snaptext/serializer/sorting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic ordering of type tags, entities and attribute names.

All helpers return new lists and leave their input untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from snaptext.errors import UnsupportedComparisonError
from snaptext.snapshot.model import Entity, TypeTag

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")


def type_tag_key(tag: TypeTag) -> str:
    """Order type tags by fully-qualified name."""
    return tag.full_name


def entity_key(entity: Entity) -> tuple[str, int, tuple[str, str], str]:
    """Order entities by their natural ordering key."""
    return entity.sort_key()


def attribute_name_key(name: str) -> str:
    """Order attribute names lexicographically."""
    return name


def sort_types(tags: Iterable[TypeTag]) -> list[TypeTag]:
    """Return type tags sorted by fully-qualified name."""
    return sorted(tags, key=type_tag_key)


def sort_entities(entities: Iterable[Entity]) -> list[Entity]:
    """Return entities in natural order."""
    return sorted(entities, key=entity_key)


def sort_attribute_names(names: Iterable[str]) -> list[str]:
    """Return attribute names in ascending lexicographic order."""
    return sorted(names, key=attribute_name_key)


def sort_objects(items: Iterable[T]) -> list[T]:
    """Sort a homogeneous collection using the rule that applies to its elements.

    Type tags are ordered by fully-qualified name; anything else must define a
    natural ordering (entities, strings, numbers).

    Args:
        items (Iterable[T]): Elements to order.

    Returns:
        list[T]: A new, sorted list.

    Raises:
        UnsupportedComparisonError: If the elements cannot be compared with each other.
    """
    elements: list[Any] = list(items)
    if all(isinstance(item, TypeTag) for item in elements):
        return sorted(elements, key=type_tag_key)
    if any(isinstance(item, TypeTag) for item in elements):
        raise UnsupportedComparisonError("Type tags cannot be ordered together with other values")
    try:
        return sorted(elements)
    except TypeError as exc:
        kinds: str = ", ".join(sorted({type(item).__name__ for item in elements}))
        raise UnsupportedComparisonError(f"Cannot order values of kind(s): {kinds}") from exc
