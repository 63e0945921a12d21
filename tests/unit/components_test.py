"""Tests for component usage statistics."""

from conftest import SceneBuilder

from unity_scene_graph.core.components import (
    SCRIPT_COMPONENT,
    analyze_components,
    categorize_component,
    component_type_name,
    count_scene_components,
)
from unity_scene_graph.core.documents import split_documents


def test_component_type_name() -> None:
    assert component_type_name(4) == "Transform"
    assert component_type_name(224) == "RectTransform"
    assert component_type_name(99999) == "Unknown (99999)"


def test_categorize_component() -> None:
    assert categorize_component("MeshRenderer") == "Rendering"
    assert categorize_component("Rigidbody2D") == "Physics"
    assert categorize_component("RectTransform") == "UI"
    assert categorize_component(SCRIPT_COMPONENT) == "Scripting"
    assert categorize_component("MonoBehaviour") == "Scripting"
    assert categorize_component("GameObject") == "Core"
    assert categorize_component("Unknown (99999)") == "Other"


def test_count_scene_components(scene_builder: SceneBuilder) -> None:
    text = (
        scene_builder.game_object("1", "Player")
        .transform("10", owner="1")
        .mono_behaviour("30", owner="1", script_guid="p1")
        .mono_behaviour("31", owner="1", script_guid="p2")
        .build()
    )
    assert count_scene_components(split_documents(text)) == {
        "GameObject": 1,
        "Transform": 1,
        "MonoBehaviour": 2,
        SCRIPT_COMPONENT: 2,
    }


def test_analyze_components_aggregates_across_scenes() -> None:
    result = analyze_components(
        {
            "Level": {"Transform": 3, "Camera": 1},
            "Menu": {"Transform": 2, "Canvas": 1},
        }
    )

    assert [(c.component_type, c.usage_count) for c in result.all_components] == [
        ("Transform", 5),
        ("Camera", 1),
        ("Canvas", 1),
    ]
    transform = result.all_components[0]
    assert transform.scenes_used == {"Level", "Menu"}
    assert [c.component_type for c in result.scene_components["Menu"]] == ["Transform", "Canvas"]
    assert [c.component_type for c in result.component_categories["UI"]] == ["Canvas"]
    assert set(result.component_categories) == {"Transform", "Camera", "UI"}


def test_analyze_components_empty() -> None:
    result = analyze_components({})
    assert result.all_components == []
    assert result.scene_components == {}
