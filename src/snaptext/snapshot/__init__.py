# topmark:header:start
#
#   project      : SnapText
#   file         : __init__.py
#   file_relpath : src/snaptext/snapshot/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snapshot graph types and loaders.

Public modules:
    - snaptext.snapshot.model
    - snaptext.snapshot.loaders
"""

from __future__ import annotations

from snaptext.snapshot.model import (
    NULL,
    AttributeValue,
    Entity,
    EntityCollection,
    EntityRef,
    GroupKey,
    Null,
    Scalar,
    ScalarCollection,
    Snapshot,
    SourceInfo,
    TypeTag,
    as_attribute_value,
)

__all__ = [
    "NULL",
    "AttributeValue",
    "Entity",
    "EntityCollection",
    "EntityRef",
    "GroupKey",
    "Null",
    "Scalar",
    "ScalarCollection",
    "Snapshot",
    "SourceInfo",
    "TypeTag",
    "as_attribute_value",
]
