"""Shared fixtures and helpers for tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

_TESTS_ROOT = Path(__file__).parent

SCENE_PREAMBLE = "%YAML 1.1\n%TAG !u! tag:unity3d.com,2011:\n"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_TESTS_ROOT)
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# SceneBuilder: assembles Unity YAML scene text document by document
# ---------------------------------------------------------------------------


def _ref(file_id: str) -> str:
    return f"{{fileID: {file_id}}}"


class SceneBuilder:
    def __init__(self) -> None:
        self._documents: list[str] = []

    def game_object(self, file_id: str, name: str | None, components: Sequence[str] = ()) -> SceneBuilder:
        lines = [f"--- !u!1 &{file_id}", "GameObject:", "  m_ObjectHideFlags: 0", "  serializedVersion: 6"]
        lines.append("  m_Component:")
        lines.extend(f"  - component: {_ref(c)}" for c in components)
        lines.append("  m_Layer: 0")
        if name is not None:
            lines.append(f"  m_Name: {name}".rstrip())
        lines.extend(["  m_TagString: Untagged", "  m_IsActive: 1"])
        self._documents.append("\n".join(lines))
        return self

    def transform(
        self,
        file_id: str,
        owner: str,
        father: str = "0",
        children: Sequence[str] = (),
        type_id: int = 4,
    ) -> SceneBuilder:
        kind = "RectTransform" if type_id == 224 else "Transform"
        lines = [
            f"--- !u!{type_id} &{file_id}",
            f"{kind}:",
            "  m_ObjectHideFlags: 0",
            f"  m_GameObject: {_ref(owner)}",
            "  m_LocalRotation: {x: 0, y: 0, z: 0, w: 1}",
            "  m_LocalPosition: {x: 0, y: 0, z: 0}",
        ]
        if children:
            lines.append("  m_Children:")
            lines.extend(f"  - {_ref(c)}" for c in children)
        else:
            lines.append("  m_Children: []")
        lines.append(f"  m_Father: {_ref(father)}")
        lines.append("  m_LocalEulerAnglesHint: {x: 0, y: 0, z: 0}")
        self._documents.append("\n".join(lines))
        return self

    def mono_behaviour(self, file_id: str, owner: str, script_guid: str, fields: Sequence[str] = ()) -> SceneBuilder:
        lines = [
            f"--- !u!114 &{file_id}",
            "MonoBehaviour:",
            "  m_ObjectHideFlags: 0",
            f"  m_GameObject: {_ref(owner)}",
            "  m_Enabled: 1",
            f"  m_Script: {{fileID: 11500000, guid: {script_guid}, type: 3}}",
            "  m_Name: ",
        ]
        lines.extend(f"  {f}" for f in fields)
        self._documents.append("\n".join(lines))
        return self

    def raw(self, document: str) -> SceneBuilder:
        self._documents.append(document.rstrip("\n"))
        return self

    def scene_roots(self, *transform_ids: str) -> SceneBuilder:
        lines = ["--- !u!1660057539 &9223372036854775807", "SceneRoots:", "  m_ObjectHideFlags: 0", "  m_Roots:"]
        lines.extend(f"  - {_ref(t)}" for t in transform_ids)
        self._documents.append("\n".join(lines))
        return self

    def build(self) -> str:
        return SCENE_PREAMBLE + "\n".join(self._documents) + "\n"


@pytest.fixture
def scene_builder() -> SceneBuilder:
    return SceneBuilder()


# ---------------------------------------------------------------------------
# Miniature Unity project on disk
# ---------------------------------------------------------------------------


def write_meta(asset_path: Path, guid: str) -> Path:
    meta_path = asset_path.with_name(asset_path.name + ".meta")
    meta_path.write_text(f"fileFormatVersion: 2\nguid: {guid}\nMonoImporter:\n  serializedVersion: 2\n")
    return meta_path


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    project = tmp_path / "Game"
    (project / "Assets").mkdir(parents=True)
    (project / "ProjectSettings").mkdir()
    return project


@pytest.fixture
def add_asset(unity_project: Path) -> Callable[..., Path]:
    """Write ``Assets/<relative>`` plus its ``.meta`` sidecar and return the asset path."""

    def _add(relative: str, guid: str, content: str = "") -> Path:
        asset_path = unity_project / "Assets" / relative
        asset_path.parent.mkdir(parents=True, exist_ok=True)
        asset_path.write_text(content, encoding="utf-8")
        write_meta(asset_path, guid)
        return asset_path

    return _add
