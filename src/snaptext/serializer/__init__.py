# topmark:header:start
#
#   project      : SnapText
#   file         : __init__.py
#   file_relpath : src/snaptext/serializer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Readable snapshot serialization.

Public modules:
    - snaptext.serializer.readable
    - snaptext.serializer.renderer
    - snaptext.serializer.sorting
    - snaptext.serializer.text
    - snaptext.serializer.walker
"""

from __future__ import annotations

from snaptext.serializer.readable import ReadableSnapshotSerializer, serialize_snapshot

__all__ = ["ReadableSnapshotSerializer", "serialize_snapshot"]
