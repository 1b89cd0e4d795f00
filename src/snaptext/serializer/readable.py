# topmark:header:start
#
#   project      : SnapText
#   file         : readable.py
#   file_relpath : src/snaptext/serializer/readable.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Readable (plain-text) snapshot serializer.

The document starts with a header describing the source and the included
types, followed by one section per group:

    Database snapshot for <url>
    -----------------------------------------------------------------
    Database type: <product name>
    Database version: <product version>
    Database user: <user>
    Included types:
        <type>
        ...

    Catalog & Schema: <catalog> / <schema>
        <type>:
            <entity>
                <attribute>: <value>

The format is write-only and not guaranteed to be stable across versions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from snaptext.config.logging import get_logger
from snaptext.constants import DEFAULT_EXPAND_DEPTH, VALID_FILE_EXTENSIONS, VALUE_NOT_SET
from snaptext.errors import SnaptextError, UnexpectedStateError
from snaptext.serializer.sorting import sort_types
from snaptext.serializer.text import (
    divider,
    ensure_final_newline,
    indent,
    join_lines,
    normalize_newlines,
)
from snaptext.serializer.walker import render_groups

if TYPE_CHECKING:
    from typing import BinaryIO

    from snaptext.config import Config
    from snaptext.config.logging import SnaptextLogger
    from snaptext.snapshot.model import Snapshot, SourceInfo

logger: SnaptextLogger = get_logger(__name__)


def _or_not_set(value: str | None) -> str:
    return value if value is not None else VALUE_NOT_SET


@dataclass(frozen=True)
class ReadableSnapshotSerializer:
    """Serialize a [`Snapshot`][snaptext.snapshot.model.Snapshot] to readable text.

    Attributes:
        expand_depth (int): Largest path size at which referenced entities are
            expanded in place. ``1`` expands the direct references of each listed
            entity; ``0`` never expands.
        two_level_grouping (bool | None): Overrides the snapshot's
            ``supports_two_level_grouping`` flag when not ``None``.
    """

    expand_depth: int = DEFAULT_EXPAND_DEPTH
    two_level_grouping: bool | None = None

    def __post_init__(self) -> None:
        if isinstance(self.expand_depth, bool) or not isinstance(self.expand_depth, int):
            raise ValueError(f"expand_depth must be an integer (got {self.expand_depth!r})")
        if self.expand_depth < 0:
            raise ValueError(f"expand_depth must be >= 0 (got {self.expand_depth})")

    @classmethod
    def from_config(cls, config: Config) -> ReadableSnapshotSerializer:
        """Build a serializer from a frozen [`Config`][snaptext.config.Config]."""
        return cls(
            expand_depth=config.expand_depth,
            two_level_grouping=config.two_level_grouping,
        )

    @property
    def valid_file_extensions(self) -> tuple[str, ...]:
        """File extensions suitable for the produced documents."""
        return VALID_FILE_EXTENSIONS

    def serialize(self, snapshot: Snapshot) -> str:
        """Render ``snapshot`` as a complete text document.

        Args:
            snapshot (Snapshot): Snapshot to render; it is not modified.

        Returns:
            str: The document, with ``\\n`` line endings, ending with a newline.

        Raises:
            SnaptextError: A domain error raised while rendering, unchanged.
            UnexpectedStateError: Wrapping any other failure; no partial output is returned.
        """
        try:
            document: str = self._render(snapshot)
        except SnaptextError:
            raise
        except Exception as exc:
            raise UnexpectedStateError(f"Cannot serialize snapshot: {exc}") from exc
        return ensure_final_newline(normalize_newlines(document))

    def write(self, snapshot: Snapshot, out: BinaryIO) -> None:
        """Serialize ``snapshot`` and write the UTF-8 encoded document to ``out``."""
        out.write(self.serialize(snapshot).encode("utf-8"))

    def _render(self, snapshot: Snapshot) -> str:
        two_level: bool = (
            snapshot.supports_two_level_grouping
            if self.two_level_grouping is None
            else self.two_level_grouping
        )
        logger.debug(
            "Serializing snapshot of %s (expand_depth=%d, two_level=%s)",
            snapshot.source.url,
            self.expand_depth,
            two_level,
        )
        parts: list[str] = [render_header(snapshot)]
        parts.extend(render_groups(snapshot, self.expand_depth, two_level))
        # Each group section is preceded by a blank line
        return "\n\n".join(parts)


def render_source(source: SourceInfo) -> str:
    """Render the source description lines (including the divider)."""
    return join_lines(
        [
            f"Database snapshot for {_or_not_set(source.url)}",
            divider(),
            f"Database type: {_or_not_set(source.product_name)}",
            f"Database version: {_or_not_set(source.product_version)}",
            f"Database user: {_or_not_set(source.user)}",
        ]
    )


def render_header(snapshot: Snapshot) -> str:
    """Render the document header: source description and included types."""
    types: list[str] = [tag.full_name for tag in sort_types(snapshot.included_types)]
    header: str = f"{render_source(snapshot.source)}\nIncluded types:"
    if types:
        header += "\n" + indent(join_lines(types))
    return header


def serialize_snapshot(
    snapshot: Snapshot,
    *,
    expand_depth: int = DEFAULT_EXPAND_DEPTH,
    two_level_grouping: bool | None = None,
) -> str:
    """Render ``snapshot`` with a one-off `ReadableSnapshotSerializer`."""
    serializer = ReadableSnapshotSerializer(
        expand_depth=expand_depth,
        two_level_grouping=two_level_grouping,
    )
    return serializer.serialize(snapshot)
