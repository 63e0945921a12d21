from unity_scene_graph.core.analyze import analyze_project
from unity_scene_graph.core.assets import AssetIndex, build_asset_index
from unity_scene_graph.core.documents import Record, split_documents
from unity_scene_graph.core.hierarchy import (
    GameObjectNode,
    SceneHierarchy,
    TransformRecord,
    build_scene_hierarchy,
)
from unity_scene_graph.core.references import detect_missing_references, scan_scene_references
from unity_scene_graph.core.render import flatten_hierarchy, format_name, render_hierarchy
from unity_scene_graph.core.scene import analyze_scene_text, parse_scene_file

__all__ = [
    "AssetIndex",
    "GameObjectNode",
    "Record",
    "SceneHierarchy",
    "TransformRecord",
    "analyze_project",
    "analyze_scene_text",
    "build_asset_index",
    "build_scene_hierarchy",
    "detect_missing_references",
    "flatten_hierarchy",
    "format_name",
    "parse_scene_file",
    "render_hierarchy",
    "scan_scene_references",
    "split_documents",
]
