"""Rebuild the GameObject tree from GameObject and Transform sub-documents.

Transforms reference their father and children by *transform* fileID while the
tree we want is over *GameObject* fileIDs, so linkage runs in three passes over
an arena of nodes keyed by fileID:

1. index every transform (transform id -> owning GameObject id, declared child lists),
2. resolve each GameObject's parent through that table,
3. attach children in their declared order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from unity_scene_graph.core.documents import NO_REFERENCE, Record, extract_file_id, split_documents

logger = logging.getLogger(__name__)

_SCENE_ROOTS_MARKER = "SceneRoots:"
_LIST_ENTRY = "- {fileID:"


@dataclass
class GameObjectNode:
    file_id: str
    name: str
    parent_id: str | None = None
    children: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TransformRecord:
    file_id: str
    owner_id: str
    father_id: str | None
    child_ids: tuple[str, ...]


@dataclass
class SceneHierarchy:
    nodes: dict[str, GameObjectNode]
    roots: list[GameObjectNode]


def _reference(value: str | None) -> str | None:
    if value is None:
        return None
    file_id = extract_file_id(value)
    if file_id is None or file_id == NO_REFERENCE:
        return None
    return file_id


def extract_game_object(record: Record) -> GameObjectNode | None:
    if not record.is_game_object:
        return None
    name = record.field("m_Name")
    if not name:
        logger.debug("Skipping GameObject %s without a name", record.file_id)
        return None
    return GameObjectNode(file_id=record.file_id, name=name)


def extract_game_objects(records: Iterable[Record]) -> dict[str, GameObjectNode]:
    nodes: dict[str, GameObjectNode] = {}
    for record in records:
        node = extract_game_object(record)
        if node is not None:
            nodes[node.file_id] = node
    return nodes


def parse_transform(record: Record) -> TransformRecord | None:
    if not record.is_transform:
        return None

    owner_id: str | None = None
    father_id: str | None = None
    child_ids: list[str] = []
    in_children = False

    for line in record.body:
        trimmed = line.strip()
        if trimmed.startswith("m_GameObject:"):
            owner_id = owner_id or _reference(trimmed)
            in_children = False
        elif trimmed.startswith("m_Father:"):
            father_id = _reference(trimmed)
            in_children = False
        elif trimmed.startswith("m_Children:"):
            in_children = not trimmed.endswith("[]")
        elif in_children and trimmed.startswith(_LIST_ENTRY):
            child_id = _reference(trimmed)
            if child_id is not None:
                child_ids.append(child_id)
        elif in_children and trimmed.startswith("m_"):
            in_children = False

    if owner_id is None:
        logger.debug("Skipping transform %s without an owning GameObject", record.file_id)
        return None
    return TransformRecord(
        file_id=record.file_id,
        owner_id=owner_id,
        father_id=father_id,
        child_ids=tuple(child_ids),
    )


def parse_transforms(records: Iterable[Record]) -> list[TransformRecord]:
    return [t for t in (parse_transform(r) for r in records) if t is not None]


def build_transform_owner_map(transforms: Iterable[TransformRecord]) -> dict[str, str]:
    return {t.file_id: t.owner_id for t in transforms}


def link_transforms(nodes: Mapping[str, GameObjectNode], transforms: list[TransformRecord]) -> dict[str, str]:
    """Fill ``parent_id`` and ``children`` on *nodes*; return the transform -> owner table."""
    transform_owner = build_transform_owner_map(transforms)
    children_order = {t.owner_id: t.child_ids for t in transforms if t.child_ids}

    for transform in transforms:
        node = nodes.get(transform.owner_id)
        if node is None:
            continue
        parent_id = None
        if transform.father_id is not None:
            parent_id = transform_owner.get(transform.father_id)
        node.parent_id = parent_id

    for owner_id, child_transform_ids in children_order.items():
        parent = nodes.get(owner_id)
        if parent is None:
            continue
        parent.children.clear()
        for child_transform_id in child_transform_ids:
            child_id = transform_owner.get(child_transform_id)
            if child_id is not None and child_id in nodes:
                parent.children.append(child_id)

    return transform_owner


def parse_scene_roots(text: str) -> list[str]:
    """Transform fileIDs listed in the ``SceneRoots`` section, in declared order."""
    root_transform_ids: list[str] = []
    in_scene_roots = False
    for line in text.splitlines():
        trimmed = line.strip()
        if not in_scene_roots:
            in_scene_roots = _SCENE_ROOTS_MARKER in trimmed
            continue
        if trimmed.startswith(_LIST_ENTRY):
            transform_id = _reference(trimmed)
            if transform_id is not None:
                root_transform_ids.append(transform_id)
        elif trimmed.startswith("---") or not trimmed:
            break
    return root_transform_ids


def order_roots(
    text: str,
    nodes: Mapping[str, GameObjectNode],
    transform_owner: Mapping[str, str],
) -> list[GameObjectNode]:
    roots = {file_id: node for file_id, node in nodes.items() if node.parent_id is None}

    ordered = [
        roots[owner_id]
        for owner_id in (transform_owner.get(t) for t in parse_scene_roots(text))
        if owner_id is not None and owner_id in roots
    ]
    if ordered:
        return ordered
    return sorted(roots.values(), key=lambda node: node.name)


def build_scene_hierarchy(text: str, records: list[Record] | None = None) -> SceneHierarchy:
    if records is None:
        records = split_documents(text)
    nodes = extract_game_objects(records)
    transform_owner = link_transforms(nodes, parse_transforms(records))
    return SceneHierarchy(nodes=nodes, roots=order_roots(text, nodes, transform_owner))
