from pathlib import Path

from unity_scene_graph.core.documents import Record, read_scene_text
from unity_scene_graph.core.hierarchy import build_scene_hierarchy
from unity_scene_graph.core.render import flatten_hierarchy, render_hierarchy
from unity_scene_graph.models import SceneAnalysisResult


def analyze_scene_text(text: str, scene_name: str, records: list[Record] | None = None) -> SceneAnalysisResult:
    hierarchy = build_scene_hierarchy(text, records)
    return SceneAnalysisResult(
        scene_name=scene_name,
        game_objects=flatten_hierarchy(hierarchy.roots, hierarchy.nodes),
        hierarchy=render_hierarchy(hierarchy.roots, hierarchy.nodes),
    )


def parse_scene_file(path: str | Path) -> SceneAnalysisResult:
    """Hierarchy dump and flattened object list for one scene file."""
    scene_path = Path(path)
    return analyze_scene_text(read_scene_text(scene_path), scene_path.name)
