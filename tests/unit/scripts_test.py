"""Tests for script usage tracking."""

from collections.abc import Callable
from pathlib import Path

from conftest import SceneBuilder

from unity_scene_graph.core.assets import build_asset_index
from unity_scene_graph.core.documents import split_documents
from unity_scene_graph.core.scripts import (
    UNKNOWN_GUID,
    ScriptCatalog,
    collect_script_references,
    find_unused_scripts,
    script_guid,
    script_guids,
)
from unity_scene_graph.models import ScriptInfo


def _script(path: Path, class_name: str) -> ScriptInfo:
    return ScriptInfo(file_path=str(path), relative_path=f"Assets/{path.name}", class_name=class_name)


def test_script_guids_in_document_order(scene_builder: SceneBuilder) -> None:
    text = (
        scene_builder.mono_behaviour("30", owner="1", script_guid="b")
        .mono_behaviour("31", owner="1", script_guid="a")
        .raw("--- !u!114 &32\nMonoBehaviour:\n  m_Script: {fileID: 0}\n")
        .build()
    )
    assert script_guids(split_documents(text)) == ["b", "a"]


def test_catalog_resolves_class_through_asset_index(unity_project: Path, add_asset: Callable[..., Path]) -> None:
    player = add_asset("Scripts/Player.cs", "p1")
    add_asset("Textures/Grass.png", "tex")
    catalog = ScriptCatalog([_script(player, "PlayerController")], build_asset_index(unity_project))

    assert catalog.class_name_for_guid("p1") == "PlayerController"
    assert catalog.class_name_for_guid("tex") is None
    assert catalog.class_name_for_guid("nope") is None


def test_collect_and_find_unused(unity_project: Path, add_asset: Callable[..., Path]) -> None:
    player = _script(add_asset("Scripts/Player.cs", "p1"), "Player")
    enemy = _script(add_asset("Scripts/Enemy.cs", "e1"), "Enemy")
    catalog = ScriptCatalog([player, enemy], build_asset_index(unity_project))

    referenced = collect_script_references(["p1", "p1", "missing"], catalog)

    assert referenced == {"Player"}
    assert find_unused_scripts([player, enemy], referenced) == [enemy]


def test_script_guid(add_asset: Callable[..., Path], tmp_path: Path) -> None:
    assert script_guid(add_asset("Scripts/Door.cs", "door-guid")) == "door-guid"
    loose = tmp_path / "Loose.cs"
    loose.write_text("class Loose {}")
    assert script_guid(loose) == UNKNOWN_GUID
