# topmark:header:start
#
#   project      : SnapText
#   file         : loaders.py
#   file_relpath : src/snaptext/snapshot/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build snapshots from JSON documents.

Live capture of a snapshot is up to the caller; this module lets the CLI (and
tests) describe one as JSON:

```json
{
  "source": {"url": "jdbc:h2:mem:app", "product_name": "H2",
             "product_version": "2.2", "user": "sa"},
  "supports_two_level_grouping": true,
  "included_types": ["core.Table", "core.Column"],
  "group_type": "core.Schema",
  "leaf_type": "core.Column",
  "entities": [
    {"id": "users", "type": "core.Table", "name": "users",
     "group": {"catalog": "app", "schema": "public"},
     "attributes": {"columns": {"refs": ["users.id"]}, "remarks": "Accounts"}},
    {"id": "users.id", "type": "core.Column", "name": "id",
     "group": {"catalog": "app", "schema": "public"},
     "attributes": {"relation": {"ref": "users"}, "nullable": false}}
  ]
}
```

Attribute values are ``null``, scalars, ``{"ref": id}``, ``{"refs": [ids]}``
or lists of scalars. ``raw`` maps attribute names to explicit plain-text
representations. When ``groups`` is missing, the groups of the entities are used.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

from snaptext.config.logging import get_logger
from snaptext.errors import SnapshotLoadError
from snaptext.snapshot.model import (
    NULL,
    AttributeValue,
    Entity,
    EntityCollection,
    EntityRef,
    GroupKey,
    Scalar,
    ScalarCollection,
    Snapshot,
    SourceInfo,
    TypeTag,
)

if TYPE_CHECKING:
    from pathlib import Path

    from snaptext.config.logging import SnaptextLogger

logger: SnaptextLogger = get_logger(__name__)

JsonObject = dict[str, Any]

_SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool)


def load_snapshot(path: Path) -> Snapshot:
    """Read and build a snapshot from a JSON file.

    Args:
        path (Path): JSON document (UTF-8).

    Returns:
        Snapshot: The snapshot graph.

    Raises:
        SnapshotLoadError: If the file is not valid JSON or not a valid snapshot document.
        OSError: If the file cannot be read.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotLoadError(f"{path}: invalid JSON ({exc})") from exc
    logger.debug("Loaded snapshot document %s", path)
    return snapshot_from_dict(data)


def snapshot_from_dict(data: Any) -> Snapshot:
    """Build a snapshot from a parsed JSON document.

    Entities are created first and their attributes resolved in a second pass,
    so references may point forward, backward or to the entity itself.

    Args:
        data (Any): Parsed JSON document.

    Returns:
        Snapshot: The snapshot graph.

    Raises:
        SnapshotLoadError: If the document is malformed or references unknown ids.
    """
    doc: JsonObject = _expect_object(data, "snapshot document")

    by_id: dict[str, Entity] = {}
    entries: list[tuple[Entity, JsonObject]] = []
    for index, raw_entry in enumerate(_expect_list(doc.get("entities", []), "entities")):
        entry: JsonObject = _expect_object(raw_entry, f"entities[{index}]")
        name: str = _expect_str(entry.get("name"), f"entities[{index}].name")
        entity_id: str = _expect_str(entry.get("id", name), f"entities[{index}].id")
        if entity_id in by_id:
            raise SnapshotLoadError(f"Duplicate entity id {entity_id!r}")
        entity = Entity(
            name=name,
            type=TypeTag(_expect_str(entry.get("type"), f"entity {entity_id!r}: type")),
            group=_group_from_json(entry.get("group"), f"entity {entity_id!r}: group"),
            raw_values=_raw_values_from_json(entry.get("raw"), entity_id),
        )
        by_id[entity_id] = entity
        entries.append((entity, entry))

    for entity_id, (entity, entry) in zip(by_id, entries):
        attributes: JsonObject = _expect_object(
            entry.get("attributes", {}), f"entity {entity_id!r}: attributes"
        )
        for attr_name, attr_value in attributes.items():
            entity.attributes[attr_name] = _value_from_json(
                attr_value, by_id, f"entity {entity_id!r}: attribute {attr_name!r}"
            )

    entities: dict[TypeTag, list[Entity]] = {}
    for entity in by_id.values():
        entities.setdefault(entity.type, []).append(entity)

    if "groups" in doc:
        groups: set[GroupKey] = set()
        for index, raw_group in enumerate(_expect_list(doc["groups"], "groups")):
            group: GroupKey | None = _group_from_json(raw_group, f"groups[{index}]")
            if group is None:
                raise SnapshotLoadError(f"groups[{index}]: a group cannot be null")
            groups.add(group)
    else:
        groups = {entity.group for entity in by_id.values() if entity.group is not None}

    snapshot = Snapshot(
        source=_source_from_json(doc.get("source", {})),
        included_types=frozenset(
            TypeTag(_expect_str(tag, "included_types[]"))
            for tag in _expect_list(doc.get("included_types", []), "included_types")
        ),
        entities={tag: tuple(items) for tag, items in entities.items()},
        grouping_keys=frozenset(groups),
        supports_two_level_grouping=_expect_bool(
            doc.get("supports_two_level_grouping", True), "supports_two_level_grouping"
        ),
        group_type=_optional_tag(doc.get("group_type"), "group_type"),
        container_type=_optional_tag(doc.get("container_type"), "container_type"),
        leaf_type=_optional_tag(doc.get("leaf_type"), "leaf_type"),
    )
    logger.debug(
        "Built snapshot: %d entities, %d types, %d groups",
        sum(1 for _ in snapshot.iter_entities()),
        len(snapshot.included_types),
        len(snapshot.grouping_keys),
    )
    return snapshot


# --- Value conversion ---


def _value_from_json(value: Any, by_id: dict[str, Entity], where: str) -> AttributeValue:
    if value is None:
        return NULL
    if isinstance(value, _SCALAR_TYPES):
        return Scalar(value)
    if isinstance(value, list):
        items: list[Any] = cast("list[Any]", value)
        if not all(isinstance(item, _SCALAR_TYPES) for item in items):
            raise SnapshotLoadError(f"{where}: lists may only hold scalars (use 'refs')")
        return ScalarCollection(tuple(items))
    if isinstance(value, dict):
        obj: JsonObject = cast("JsonObject", value)
        if set(obj) == {"ref"}:
            return EntityRef(_resolve(obj["ref"], by_id, where))
        if set(obj) == {"refs"}:
            refs: list[Any] = _expect_list(obj["refs"], f"{where}: refs")
            return EntityCollection(tuple(_resolve(ref, by_id, where) for ref in refs))
    raise SnapshotLoadError(f"{where}: unsupported value {value!r}")


def _resolve(ref: Any, by_id: dict[str, Entity], where: str) -> Entity:
    entity_id: str = _expect_str(ref, where)
    try:
        return by_id[entity_id]
    except KeyError:
        raise SnapshotLoadError(f"{where}: unknown entity id {entity_id!r}") from None


def _group_from_json(value: Any, where: str) -> GroupKey | None:
    if value is None:
        return None
    obj: JsonObject = _expect_object(value, where)
    return GroupKey(
        catalog=_optional_str(obj.get("catalog"), f"{where}.catalog"),
        schema=_optional_str(obj.get("schema"), f"{where}.schema"),
    )


def _source_from_json(value: Any) -> SourceInfo:
    obj: JsonObject = _expect_object(value, "source")
    return SourceInfo(
        url=_optional_str(obj.get("url"), "source.url"),
        product_name=_optional_str(obj.get("product_name"), "source.product_name"),
        product_version=_optional_str(obj.get("product_version"), "source.product_version"),
        user=_optional_str(obj.get("user"), "source.user"),
    )


def _raw_values_from_json(value: Any, entity_id: str) -> dict[str, str | None]:
    if value is None:
        return {}
    obj: JsonObject = _expect_object(value, f"entity {entity_id!r}: raw")
    return {
        key: _optional_str(raw, f"entity {entity_id!r}: raw {key!r}") for key, raw in obj.items()
    }


def _optional_tag(value: Any, where: str) -> TypeTag | None:
    name: str | None = _optional_str(value, where)
    return TypeTag(name) if name is not None else None


# --- Shape checks ---


def _expect_object(value: Any, where: str) -> JsonObject:
    if not isinstance(value, dict):
        raise SnapshotLoadError(f"{where}: expected an object, got {type(value).__name__}")
    return cast("JsonObject", value)


def _expect_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise SnapshotLoadError(f"{where}: expected a list, got {type(value).__name__}")
    return cast("list[Any]", value)


def _expect_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise SnapshotLoadError(f"{where}: expected a string, got {type(value).__name__}")
    return value


def _expect_bool(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise SnapshotLoadError(f"{where}: expected a boolean, got {type(value).__name__}")
    return value


def _optional_str(value: Any, where: str) -> str | None:
    return None if value is None else _expect_str(value, where)
