# topmark:header:start
#
#   project      : SnapText
#   file         : walker.py
#   file_relpath : src/snaptext/serializer/walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group-by-group traversal of a snapshot.

Entities are partitioned by their owning group (catalog / schema). Groups are
visited in label order, and within a group every listed type is visited in
type-name order. Structural types (the group type, its container type and the
leaf type) are never listed: they are either implied by the section header or
rendered inside their owners.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from snaptext.config.logging import get_logger
from snaptext.serializer.renderer import render_entity
from snaptext.serializer.sorting import sort_entities, sort_types
from snaptext.serializer.text import indent, join_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from snaptext.config.logging import SnaptextLogger
    from snaptext.snapshot.model import Entity, GroupKey, Snapshot, TypeTag

logger: SnaptextLogger = get_logger(__name__)

BLANK_LINE: str = "\n\n"


def group_label(group: GroupKey, two_level: bool) -> str:
    """Return the label of ``group`` as shown in its section header."""
    return group.label(two_level)


def sorted_groups(snapshot: Snapshot, two_level: bool) -> list[GroupKey]:
    """Return the snapshot's groups ordered by label (ties broken by catalog/schema)."""
    return sorted(
        snapshot.grouping_keys,
        key=lambda group: (group_label(group, two_level), group.sort_key()),
    )


def listed_types(snapshot: Snapshot) -> list[TypeTag]:
    """Return the included types listed per group, in type-name order."""
    structural: frozenset[TypeTag] = snapshot.structural_types()
    return [tag for tag in sort_types(snapshot.included_types) if tag not in structural]


def entities_in_group(entities: Iterable[Entity], group: GroupKey) -> list[Entity]:
    """Return the entities owned by ``group``; ungrouped entities are dropped."""
    return [entity for entity in entities if entity.group is not None and entity.group == group]


def walk(snapshot: Snapshot, two_level: bool) -> Iterator[tuple[GroupKey, TypeTag, list[Entity]]]:
    """Enumerate ``(group, type, entities)`` triples in document order.

    Triples with no entities are skipped; entities come in natural order.

    Args:
        snapshot (Snapshot): Snapshot to traverse.
        two_level (bool): Whether group labels include the schema.

    Yields:
        tuple[GroupKey, TypeTag, list[Entity]]: The group, the type and its entities.
    """
    types: list[TypeTag] = listed_types(snapshot)
    for group in sorted_groups(snapshot, two_level):
        for tag in types:
            entities: list[Entity] = entities_in_group(snapshot.entities_of(tag), group)
            if not entities:
                continue
            logger.trace("%s / %s: %d entities", group_label(group, two_level), tag, len(entities))
            yield group, tag, sort_entities(entities)


def render_type_listing(
    tag: TypeTag,
    entities: Iterable[Entity],
    expand_depth: int,
    *,
    namespace_types: frozenset[TypeTag] = frozenset(),
) -> str:
    """Render one type sub-listing: a ``"<type>:"`` line followed by indented entity blocks.

    Args:
        tag (TypeTag): Type of the listed entities.
        entities (Iterable[Entity]): Entities to list (sorted here).
        expand_depth (int): Expansion depth for referenced entities.
        namespace_types (frozenset[TypeTag]): Types whose references are never rendered.

    Returns:
        str: The listing without trailing newline, or ``""`` when ``entities`` is empty.
    """
    blocks: list[str] = []
    for entity in sort_entities(entities):
        body: str = render_entity(
            entity,
            frozenset(),
            entity.name,
            expand_depth,
            namespace_types=namespace_types,
        )
        blocks.append(f"{entity.name}\n{indent(body)}" if body else entity.name)
    if not blocks:
        return ""
    return f"{tag.full_name}:\n{indent(join_lines(blocks))}"


def section_header(group: GroupKey, two_level: bool) -> str:
    """Return the header line of a group section."""
    if two_level:
        return f"Catalog & Schema: {group_label(group, two_level)}"
    return f"Catalog: {group_label(group, two_level)}"


def render_groups(snapshot: Snapshot, expand_depth: int, two_level: bool) -> list[str]:
    """Render one section per group of ``snapshot``.

    Every group gets a section, even when none of its entities is listed.

    Args:
        snapshot (Snapshot): Snapshot to render.
        expand_depth (int): Expansion depth for referenced entities.
        two_level (bool): Whether group labels include the schema.

    Returns:
        list[str]: Sections in group order, each without trailing newline.
    """
    namespace_types: frozenset[TypeTag] = snapshot.namespace_types()
    listings: dict[GroupKey, list[str]] = {group: [] for group in snapshot.grouping_keys}
    for group, tag, entities in walk(snapshot, two_level):
        listings[group].append(
            render_type_listing(tag, entities, expand_depth, namespace_types=namespace_types)
        )

    sections: list[str] = []
    for group in sorted_groups(snapshot, two_level):
        header: str = section_header(group, two_level)
        body: list[str] = listings[group]
        if body:
            # Type listings are separated by a blank line
            sections.append(f"{header}\n{indent(BLANK_LINE.join(body))}")
        else:
            sections.append(header)
    return sections
