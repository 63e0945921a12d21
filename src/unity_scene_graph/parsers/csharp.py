"""MonoBehaviour script models extracted from C# sources with tree-sitter."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from pathlib import Path
from typing import cast

from tree_sitter import Node, Parser
from tree_sitter_language_pack import SupportedLanguage, get_parser

from unity_scene_graph.core.assets import DEFAULT_ASSETS_DIR, assets_relative_path
from unity_scene_graph.models import FieldInfo, ScriptInfo

logger = logging.getLogger(__name__)

_MONO_BEHAVIOUR = "MonoBehaviour"
_SERIALIZE_FIELD = "SerializeField"


def _text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _iter_nodes(node: Node, node_type: str) -> Iterator[Node]:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == node_type:
            yield current
        stack.extend(reversed(current.children))


def _base_types(class_node: Node) -> list[str]:
    for child in class_node.children:
        if child.type == "base_list":
            return [_text(base) for base in child.named_children]
    return []


def is_mono_behaviour_class(class_node: Node) -> bool:
    return any(
        base == _MONO_BEHAVIOUR or base.endswith(f".{_MONO_BEHAVIOUR}") for base in _base_types(class_node)
    )


def _declarator_name(declarator: Node) -> str:
    name = declarator.child_by_field_name("name")
    if name is None:
        name = next((c for c in declarator.children if c.type == "identifier"), None)
    return _text(name)


def serialized_fields(class_node: Node) -> list[FieldInfo]:
    """Public fields, or fields marked ``[SerializeField]``, declared directly in the class body."""
    body = class_node.child_by_field_name("body")
    if body is None:
        return []

    fields: list[FieldInfo] = []
    for member in body.named_children:
        if member.type != "field_declaration":
            continue
        is_public = any(c.type == "modifier" and _text(c) == "public" for c in member.children)
        has_serialize_field = any(
            c.type == "attribute_list" and _SERIALIZE_FIELD in _text(c) for c in member.children
        )
        if not (is_public or has_serialize_field):
            continue
        declaration = next((c for c in member.children if c.type == "variable_declaration"), None)
        if declaration is None:
            continue
        field_type = _text(declaration.child_by_field_name("type"))
        for declarator in declaration.named_children:
            if declarator.type == "variable_declarator":
                fields.append(FieldInfo(name=_declarator_name(declarator), type=field_type))
    return fields


class CSharpScriptModelProvider:
    """Implements the ``ScriptModelProvider`` protocol."""

    def __init__(self, assets_dir: str = DEFAULT_ASSETS_DIR) -> None:
        self._assets_dir = assets_dir
        self._local = threading.local()

    @property
    def _parser(self) -> Parser:
        # tree-sitter parsers must not be shared between worker threads
        parser: Parser | None = getattr(self._local, "parser", None)
        if parser is None:
            parser = get_parser(cast(SupportedLanguage, "csharp"))
            self._local.parser = parser
        return parser

    def analyze_source(self, source: bytes, path: Path) -> ScriptInfo | None:
        tree = self._parser.parse(source)
        for class_node in _iter_nodes(tree.root_node, "class_declaration"):
            if not is_mono_behaviour_class(class_node):
                continue
            return ScriptInfo(
                file_path=str(path),
                relative_path=assets_relative_path(path, self._assets_dir),
                class_name=_text(class_node.child_by_field_name("name")),
                serialized_fields=serialized_fields(class_node),
            )
        return None

    def analyze_script(self, path: Path) -> ScriptInfo | None:
        try:
            source = path.read_bytes()
        except OSError as exc:
            logger.warning("Could not read script %s: %s", path, exc)
            return None
        return self.analyze_source(source, path)
