# topmark:header:start
#
#   project      : SnapText
#   file         : model.py
#   file_relpath : src/snaptext/snapshot/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snapshot data model consumed by the readable serializer.

A snapshot is a read-only graph of typed, named entities. Each entity carries a
mapping of attribute name to [`AttributeValue`][snaptext.snapshot.model.AttributeValue],
an explicit tagged union so that the serializer can dispatch with ``match`` instead
of probing arbitrary Python objects.

Entities may reference each other (including themselves), so equality and hashing
are identity based. Collaborators build the graph first (closing cycles with
[`Entity.set_attribute`][snaptext.snapshot.model.Entity.set_attribute]) and hand it
to the serializer, which never mutates it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING, Union

from snaptext.constants import VALUE_NOT_SET
from snaptext.errors import UnexpectedStateError

if TYPE_CHECKING:
    from collections.abc import Iterator

ScalarType = Union[str, int, float, bool]


@dataclass(frozen=True)
class TypeTag:
    """Entity type tag, identified by its fully-qualified name.

    Attributes:
        full_name (str): Fully-qualified type name, e.g. ``liquibase.structure.core.Table``.
    """

    full_name: str

    @property
    def name(self) -> str:
        """Return the last dotted component of the type name."""
        return self.full_name.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class GroupKey:
    """Owning namespace of an entity (a catalog / schema pair).

    Attributes:
        catalog (str | None): Outer namespace.
        schema (str | None): Inner namespace; unused when the source has a single level.
    """

    catalog: str | None = None
    schema: str | None = None

    def label(self, two_level: bool) -> str:
        """Render the group label used in section headers and for ordering.

        Args:
            two_level (bool): Whether the source supports catalog *and* schema.

        Returns:
            str: ``"<catalog> / <schema>"`` when ``two_level`` is set, ``"<catalog>"``
                otherwise. Missing parts render as ``<not set>``.
        """
        catalog: str = self.catalog if self.catalog is not None else VALUE_NOT_SET
        if not two_level:
            return catalog
        schema: str = self.schema if self.schema is not None else VALUE_NOT_SET
        return f"{catalog} / {schema}"

    def sort_key(self) -> tuple[str, str]:
        """Return a key ordering groups by catalog, then schema (missing parts first)."""
        return (self.catalog or "", self.schema or "")


@dataclass(frozen=True)
class SourceInfo:
    """Descriptive strings about the snapshot source, passed through to the document header."""

    url: str | None = None
    product_name: str | None = None
    product_version: str | None = None
    user: str | None = None


# --- Attribute values ---


@dataclass(frozen=True)
class Scalar:
    """A plain scalar attribute value."""

    value: ScalarType


@dataclass(frozen=True)
class EntityRef:
    """A reference to a single other entity."""

    target: Entity


@dataclass(frozen=True)
class EntityCollection:
    """An unordered collection of entities."""

    items: tuple[Entity, ...] = ()


@dataclass(frozen=True)
class ScalarCollection:
    """An ordered collection of scalar values."""

    items: tuple[ScalarType, ...] = ()


@dataclass(frozen=True)
class Null:
    """An absent attribute value."""


NULL = Null()

AttributeValue = Union[Scalar, EntityRef, EntityCollection, ScalarCollection, Null]


def as_attribute_value(obj: object) -> AttributeValue:
    """Coerce a plain Python object into an attribute value variant.

    Args:
        obj (object): ``None``, a scalar, an [`Entity`][snaptext.snapshot.model.Entity],
            an iterable of entities or of scalars, or an attribute value (returned as is).

    Returns:
        AttributeValue: The matching variant.

    Raises:
        UnexpectedStateError: If ``obj`` (or one of its items) cannot be represented,
            or an iterable mixes entities and scalars.
    """
    if obj is None:
        return NULL
    if isinstance(obj, (Scalar, EntityRef, EntityCollection, ScalarCollection, Null)):
        return obj
    if isinstance(obj, Entity):
        return EntityRef(obj)
    if isinstance(obj, (str, int, float, bool)):
        return Scalar(obj)
    if isinstance(obj, Mapping):
        raise UnexpectedStateError(f"Mappings are not valid attribute values: {obj!r}")
    if isinstance(obj, Iterable):
        items: list[object] = list(obj)
        if all(isinstance(item, Entity) for item in items):
            # An empty iterable is stored as an (empty) entity collection
            return EntityCollection(tuple(item for item in items if isinstance(item, Entity)))
        if all(isinstance(item, (str, int, float, bool)) for item in items):
            return ScalarCollection(tuple(items))  # type: ignore[arg-type]
        raise UnexpectedStateError(f"Cannot mix entities and scalars in one attribute: {items!r}")
    raise UnexpectedStateError(f"Unsupported attribute value of type {type(obj).__name__}")


def _format_scalar(value: ScalarType) -> str:
    return str(value)


@total_ordering
@dataclass(eq=False, repr=False)
class Entity:
    """One structured, named object in the snapshot graph.

    Attributes:
        name (str): Entity name; also its identity for cycle suppression.
        type (TypeTag): Entity type.
        group (GroupKey | None): Owning namespace, if any.
        attributes (dict[str, AttributeValue]): Attribute values by name.
        raw_values (dict[str, str | None]): Collaborator-supplied raw representations,
            overriding the defaults computed by
            [`raw_representation`][snaptext.snapshot.model.Entity.raw_representation].
    """

    name: str
    type: TypeTag
    group: GroupKey | None = None
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    raw_values: dict[str, str | None] = field(default_factory=dict)

    def __repr__(self) -> str:
        # Attributes are left out: they may lead back to this entity.
        return f"Entity({self.type.full_name}:{self.name!r}, group={self.group!r})"

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def sort_key(self) -> tuple[str, int, tuple[str, str], str]:
        """Return the natural ordering key: name, then group (ungrouped first), then type."""
        if self.group is None:
            return (self.name, 0, ("", ""), self.type.full_name)
        return (self.name, 1, self.group.sort_key(), self.type.full_name)

    def set_attribute(self, name: str, value: object) -> None:
        """Set an attribute, coercing plain Python values to attribute value variants.

        Args:
            name (str): Attribute name.
            value (object): Value accepted by
                [`as_attribute_value`][snaptext.snapshot.model.as_attribute_value].
        """
        self.attributes[name] = as_attribute_value(value)

    def attribute_names(self) -> frozenset[str]:
        """Return the names of all attributes of this entity."""
        return frozenset(self.attributes)

    def attribute(self, name: str) -> AttributeValue:
        """Return the value of attribute ``name`` (``NULL`` if missing)."""
        return self.attributes.get(name, NULL)

    def raw_representation(self, name: str) -> str | None:
        """Return the plain-text representation of attribute ``name``.

        This is what the serializer prints when it does not expand a value. An
        explicit entry in ``raw_values`` wins over the computed default.

        Args:
            name (str): Attribute name.

        Returns:
            str | None: The representation, or ``None`` when it is empty or absent.
        """
        if name in self.raw_values:
            raw: str | None = self.raw_values[name]
            return raw or None

        text: str
        match self.attribute(name):
            case Null():
                return None
            case Scalar(value=value):
                text = _format_scalar(value)
            case EntityRef(target=target):
                text = target.name
            case EntityCollection(items=items):
                if not items:
                    return None
                text = "[" + ", ".join(item.name for item in sorted(items)) + "]"
            case ScalarCollection(items=scalars):
                if not scalars:
                    return None
                text = "[" + ", ".join(_format_scalar(v) for v in scalars) + "]"
            case other:
                raise UnexpectedStateError(
                    f"Attribute {name!r} of {self!r} has unsupported value {other!r}"
                )
        return text or None


@dataclass(frozen=True)
class Snapshot:
    """Root of a snapshot graph.

    Attributes:
        source (SourceInfo): Descriptive header strings.
        included_types (frozenset[TypeTag]): Types captured in this snapshot.
        entities (Mapping[TypeTag, tuple[Entity, ...]]): Entities by type.
        grouping_keys (frozenset[GroupKey]): Known namespaces.
        supports_two_level_grouping (bool): Whether namespaces are catalog *and* schema.
        group_type (TypeTag | None): Type tag of the namespace entities themselves.
        container_type (TypeTag | None): Type tag of the namespace container.
        leaf_type (TypeTag | None): Fine-grained type not listed at the top level
            (e.g. columns, which are rendered inside their tables).
    """

    source: SourceInfo = field(default_factory=SourceInfo)
    included_types: frozenset[TypeTag] = frozenset()
    entities: Mapping[TypeTag, tuple[Entity, ...]] = field(default_factory=dict)
    grouping_keys: frozenset[GroupKey] = frozenset()
    supports_two_level_grouping: bool = True
    group_type: TypeTag | None = None
    container_type: TypeTag | None = None
    leaf_type: TypeTag | None = None

    def entities_of(self, tag: TypeTag) -> tuple[Entity, ...]:
        """Return all entities of type ``tag`` (empty if none were captured)."""
        return tuple(self.entities.get(tag, ()))

    def structural_types(self) -> frozenset[TypeTag]:
        """Return the type tags that are never listed per group."""
        return frozenset(
            tag
            for tag in (self.group_type, self.container_type, self.leaf_type)
            if tag is not None
        )

    def namespace_types(self) -> frozenset[TypeTag]:
        """Return the group and container type tags.

        References to entities of these types are structural and never rendered.
        """
        return frozenset(
            tag for tag in (self.group_type, self.container_type) if tag is not None
        )

    def iter_entities(self) -> Iterator[Entity]:
        """Iterate over every entity of every captured type."""
        for entities in self.entities.values():
            yield from entities
