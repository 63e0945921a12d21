from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from unity_scene_graph.core.hierarchy import GameObjectNode
from unity_scene_graph.models import GameObjectInfo

_INDENT = "--"


def format_name(name: str) -> str:
    """Insert a space between a letter and a digit that directly follows it: ``Child1`` -> ``Child 1``."""
    chars: list[str] = []
    for i, ch in enumerate(name):
        if ch.isdecimal() and i > 0 and name[i - 1].isalpha():
            chars.append(" ")
        chars.append(ch)
    return "".join(chars)


def walk_hierarchy(
    roots: Sequence[GameObjectNode],
    nodes: Mapping[str, GameObjectNode],
) -> Iterator[tuple[GameObjectNode, int]]:
    """Depth-first pre-order over the ordered roots, yielding ``(node, depth)``."""

    def _walk(node: GameObjectNode, depth: int, ancestors: frozenset[str]) -> Iterator[tuple[GameObjectNode, int]]:
        yield node, depth
        path = ancestors | {node.file_id}
        for child_id in node.children:
            # a malformed scene can declare a transform as its own ancestor
            if child_id in path:
                continue
            child = nodes.get(child_id)
            if child is not None:
                yield from _walk(child, depth + 1, path)

    for root in roots:
        yield from _walk(root, 0, frozenset())


def render_hierarchy(roots: Sequence[GameObjectNode], nodes: Mapping[str, GameObjectNode]) -> str:
    lines = [f"{_INDENT * depth}{format_name(node.name)}" for node, depth in walk_hierarchy(roots, nodes)]
    return "\n".join(lines).rstrip()


def flatten_hierarchy(roots: Sequence[GameObjectNode], nodes: Mapping[str, GameObjectNode]) -> list[GameObjectInfo]:
    return [
        GameObjectInfo(name=node.name, depth=depth, file_id=node.file_id, parent_id=node.parent_id)
        for node, depth in walk_hierarchy(roots, nodes)
    ]
