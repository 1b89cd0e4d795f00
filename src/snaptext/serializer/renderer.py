# topmark:header:start
#
#   project      : SnapText
#   file         : renderer.py
#   file_relpath : src/snaptext/serializer/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive rendering of a single entity and the entities it refers to.

An entity renders as one ``"<attribute>: <value>"`` line per descriptive
attribute, in attribute-name order. Referenced entities are expanded in place
(indented one level) while the current path is short enough, and printed with
their raw representation otherwise.

Cycle suppression is keyed by entity *name* along the current path only: the
path is a ``frozenset`` extended per recursive call, so sibling branches never
see each other's names. A reference to a name already on the path produces no
line at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from snaptext.config.logging import get_logger
from snaptext.constants import STRUCTURAL_ATTRIBUTE_NAMES
from snaptext.errors import UnexpectedStateError
from snaptext.serializer.sorting import sort_attribute_names, sort_entities
from snaptext.serializer.text import indent, join_lines
from snaptext.snapshot.model import (
    EntityCollection,
    EntityRef,
    Null,
    Scalar,
    ScalarCollection,
)

if TYPE_CHECKING:
    from snaptext.config.logging import SnaptextLogger
    from snaptext.snapshot.model import Entity, TypeTag

logger: SnaptextLogger = get_logger(__name__)


def render_entity(
    entity: Entity,
    visited: frozenset[str],
    owner_name: str,
    expand_depth: int,
    *,
    namespace_types: frozenset[TypeTag] = frozenset(),
) -> str:
    """Render the attribute block of ``entity``.

    Args:
        entity (Entity): Entity to render.
        visited (frozenset[str]): Names of the entities already on the current path.
        owner_name (str): Name of the entity that led here (the entity itself at top level).
        expand_depth (int): Largest path size at which referenced entities are expanded.
        namespace_types (frozenset[TypeTag]): Types whose references are never rendered.

    Returns:
        str: The attribute lines, without a trailing newline (empty if nothing survives).

    Raises:
        UnexpectedStateError: If an attribute holds a value of an unknown kind.
    """
    path: frozenset[str] = visited | {owner_name}
    expand: bool = len(path) <= expand_depth

    lines: list[str] = []
    for name in sort_attribute_names(entity.attribute_names() - STRUCTURAL_ATTRIBUTE_NAMES):
        value: str | None = _render_value(
            entity,
            name,
            path=path,
            expand=expand,
            expand_depth=expand_depth,
            namespace_types=namespace_types,
        )
        if value is None:
            continue
        lines.append(f"{name}: {value}")
    return join_lines(lines)


def _render_value(
    entity: Entity,
    name: str,
    *,
    path: frozenset[str],
    expand: bool,
    expand_depth: int,
    namespace_types: frozenset[TypeTag],
) -> str | None:
    value = entity.attribute(name)
    match value:
        case Null():
            return None
        case EntityRef(target=target):
            if not _is_renderable(target, path, namespace_types):
                logger.trace("%s.%s: suppressed reference to %s", entity.name, name, target.name)
                return None
            if expand:
                return _render_expanded(entity, target, path, expand_depth, namespace_types)
            return entity.raw_representation(name)
        case EntityCollection(items=items):
            if not items:
                return None
            if not expand:
                return entity.raw_representation(name)
            blocks: list[str] = [
                _render_expanded(entity, item, path, expand_depth, namespace_types)
                for item in sort_entities(items)
                if _is_renderable(item, path, namespace_types)
            ]
            if not blocks:
                logger.trace("%s.%s: every element suppressed", entity.name, name)
                return None
            return "\n" + indent(join_lines(blocks))
        case Scalar() | ScalarCollection():
            return entity.raw_representation(name)
        case _:
            raise UnexpectedStateError(
                f"Attribute {name!r} of {entity!r} has unsupported value {value!r}"
            )


def _is_renderable(
    target: Entity,
    path: frozenset[str],
    namespace_types: frozenset[TypeTag],
) -> bool:
    return target.type not in namespace_types and target.name not in path


def _render_expanded(
    owner: Entity,
    target: Entity,
    path: frozenset[str],
    expand_depth: int,
    namespace_types: frozenset[TypeTag],
) -> str:
    body: str = render_entity(
        target,
        path,
        owner.name,
        expand_depth,
        namespace_types=namespace_types,
    )
    if not body:
        return target.name
    return f"{target.name}\n{indent(body)}"
