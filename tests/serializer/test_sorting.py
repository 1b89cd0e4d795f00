# topmark:header:start
#
#   project      : SnapText
#   file         : test_sorting.py
#   file_relpath : tests/serializer/test_sorting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sorter: ordering of type tags, entities and attribute names."""

from __future__ import annotations

import pytest

from snaptext.errors import UnsupportedComparisonError
from snaptext.serializer.sorting import (
    sort_attribute_names,
    sort_entities,
    sort_objects,
    sort_types,
)
from snaptext.snapshot.model import TypeTag
from tests.builders import AUDIT, INDEX, TABLE, VIEW, entity


def test_sort_types_by_full_name() -> None:
    """Type tags order by fully-qualified name, not by short name."""
    tags = [VIEW, TypeTag("a.Zeta"), TABLE, INDEX]
    assert sort_types(tags) == [TypeTag("a.Zeta"), INDEX, TABLE, VIEW]


def test_sort_entities_natural_order() -> None:
    """Entities order by name first, then by group."""
    users_public = entity("users")
    users_audit = entity("users", group=AUDIT)
    accounts = entity("accounts")
    assert sort_entities([users_public, accounts, users_audit]) == [
        accounts,
        users_audit,
        users_public,
    ]


def test_sort_attribute_names_codepoint_order() -> None:
    """Attribute names order by code point (uppercase before lowercase)."""
    assert sort_attribute_names(["b", "a", "B", "_x"]) == ["B", "_x", "a", "b"]


def test_sort_objects_dispatches_on_element_kind() -> None:
    """`sort_objects` picks the ordering rule from the elements."""
    assert sort_objects([VIEW, TABLE]) == [TABLE, VIEW]
    assert sort_objects(["b", "a"]) == ["a", "b"]
    b, a = entity("b"), entity("a")
    assert sort_objects([b, a]) == [a, b]
    assert sort_objects([]) == []


def test_sort_objects_leaves_input_untouched() -> None:
    """A new list is returned; the input keeps its order."""
    names = ["b", "a"]
    assert sort_objects(names) == ["a", "b"]
    assert names == ["b", "a"]


@pytest.mark.parametrize(
    "items",
    [
        [TABLE, "a"],
        [entity("a"), "a"],
        [{"a": 1}, {"b": 2}],
        [object(), object()],
    ],
)
def test_sort_objects_rejects_incomparable_elements(items: list[object]) -> None:
    """Mixing kinds without a common ordering fails fast."""
    with pytest.raises(UnsupportedComparisonError):
        sort_objects(items)


def test_unsupported_comparison_is_a_type_error() -> None:
    """Callers catching `TypeError` also see sorter contract violations."""
    with pytest.raises(TypeError):
        sort_objects([1, "a"])
