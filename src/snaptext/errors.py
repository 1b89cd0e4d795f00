# topmark:header:start
#
#   project      : SnapText
#   file         : errors.py
#   file_relpath : src/snaptext/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SnapText core.

The serializer is all-or-nothing: callers receive either the complete document
or exactly one of the errors below. CLI-facing errors (with exit codes) live in
`snaptext.cli.errors` and wrap these.
"""

from __future__ import annotations


class SnaptextError(Exception):
    """Base class for all SnapText core errors."""


class UnsupportedComparisonError(SnaptextError, TypeError):
    """Raised when elements handed to the sorter have no common ordering.

    Mixing type tags with entities, or entities with plain strings, is a
    contract violation of the caller.
    """


class UnexpectedStateError(SnaptextError, RuntimeError):
    """Raised when the snapshot graph is in a state the serializer cannot render.

    Typical causes are an attribute value of an unknown kind, or a collaborator
    raising while a value is computed. The original exception (if any) is
    chained as ``__cause__``.
    """


class SnapshotLoadError(SnaptextError, ValueError):
    """Raised when a snapshot document is malformed or references unknown entities."""
