"""Flag asset GUID references in scenes that no ``.meta`` file declares.

Each scene line yields at most one issue. Shapes are tried in order: the
MonoBehaviour script reference, any other serialized field of a MonoBehaviour,
then renderer materials, meshes and textures on built-in components.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path

from unity_scene_graph.core.documents import NO_REFERENCE, Record, read_scene_text, split_documents
from unity_scene_graph.models import MissingReferenceResult, ReferenceIssue

logger = logging.getLogger(__name__)

UNKNOWN_GAME_OBJECT = "Unknown GameObject"
UNKNOWN_SCRIPT = "Unknown Script"
UNKNOWN_FIELD = "Unknown Field"
UNKNOWN_ASSET = "Unknown Asset"

_SCRIPT_PREFIX = "m_Script: {fileID:"
_LIST_ENTRY = "- {fileID:"
_TEXTURE_FIELDS = ("m_Texture:", "m_MainTexture:")

_ASSET_KEYWORDS = (
    ("material", "Material"),
    ("texture", "Texture"),
    ("mesh", "Mesh"),
    ("audio", "AudioClip"),
    ("sprite", "Sprite"),
    ("prefab", "Prefab"),
    ("script", "Script"),
)


def extract_guid_from_reference(line: str) -> str:
    """``{fileID: 11400000, guid: abc, type: 2}`` -> ``abc``."""
    guid_index = line.find("guid:")
    if guid_index < 0:
        return ""
    start = guid_index + len("guid:")
    end = line.find(",", start)
    if end < 0:
        end = line.find("}", start)
    if end < 0:
        end = len(line)
    return line[start:end].strip(' "\t')


def extract_field_name(line: str, enclosing_field: str | None = None) -> str:
    trimmed = line.strip()
    if trimmed.startswith("- "):
        entry = trimmed[2:]
        colon = entry.find(":")
        brace = entry.find("{")
        # struct list entries carry their own key: "- prefab: {fileID: ...}"
        if colon > 0 and (brace < 0 or colon < brace):
            return entry[:colon].strip()
        return enclosing_field or UNKNOWN_FIELD
    colon = trimmed.find(":")
    if colon > 0:
        return trimmed[:colon].strip()
    return UNKNOWN_FIELD


def infer_asset_type(line: str) -> str:
    lowered = line.lower()
    for keyword, asset_type in _ASSET_KEYWORDS:
        if keyword in lowered:
            return asset_type
    return UNKNOWN_ASSET


def _issue(scene_name: str, asset_type: str, reference_type: str, guid: str, description: str) -> ReferenceIssue:
    return ReferenceIssue(
        scene_name=scene_name,
        game_object_name=UNKNOWN_GAME_OBJECT,
        asset_type=asset_type,
        reference_type=reference_type,
        missing_guid=guid,
        description=description,
    )


def scan_record_references(record: Record, index: Mapping[str, Path], scene_name: str) -> list[ReferenceIssue]:
    issues: list[ReferenceIssue] = []
    # Only a resolved m_Script updates this; object names are never tracked,
    # so serialized-field issues carry the placeholder GameObject name.
    current_script = UNKNOWN_SCRIPT
    enclosing_field: str | None = None

    for line in record.body:
        trimmed = line.strip()
        if trimmed.endswith(":") and not trimmed.startswith("- "):
            enclosing_field = trimmed[:-1]
        if "guid:" not in trimmed:
            continue
        guid = extract_guid_from_reference(trimmed)
        if not guid or guid == NO_REFERENCE:
            continue

        if record.is_mono_behaviour and trimmed.startswith(_SCRIPT_PREFIX):
            if guid in index:
                current_script = index[guid].name
            else:
                issues.append(
                    _issue(
                        scene_name,
                        "Script",
                        "MonoBehaviour Script",
                        guid,
                        "Missing script reference in MonoBehaviour component",
                    )
                )
            continue

        if guid in index:
            continue

        if record.is_mono_behaviour:
            if "fileID:" in trimmed:
                field_name = extract_field_name(trimmed, enclosing_field)
                issues.append(
                    _issue(
                        scene_name,
                        infer_asset_type(trimmed),
                        f"Serialized Field: {field_name}",
                        guid,
                        f"Missing asset reference in {current_script}.{field_name}",
                    )
                )
        elif trimmed.startswith("m_Materials:") or trimmed.startswith(_LIST_ENTRY):
            issues.append(
                _issue(
                    scene_name, "Material", "Renderer Material", guid, "Missing material reference in renderer component"
                )
            )
        elif trimmed.startswith("m_Mesh:"):
            issues.append(
                _issue(scene_name, "Mesh", "MeshFilter Mesh", guid, "Missing mesh reference in MeshFilter component")
            )
        elif trimmed.startswith(_TEXTURE_FIELDS):
            issues.append(_issue(scene_name, "Texture", "Texture Reference", guid, "Missing texture reference"))

    return issues


def scan_scene_references(text: str, index: Mapping[str, Path], scene_name: str) -> list[ReferenceIssue]:
    issues: list[ReferenceIssue] = []
    for record in split_documents(text):
        issues.extend(scan_record_references(record, index, scene_name))
    return issues


def scan_scene_file(path: str | Path, index: Mapping[str, Path]) -> list[ReferenceIssue]:
    scene_path = Path(path)
    issues = scan_scene_references(read_scene_text(scene_path), index, scene_path.stem)
    if issues:
        logger.debug("%s: %d missing reference(s)", scene_path.name, len(issues))
    return issues


def summarize_references(scene_issues: Iterable[tuple[str, list[ReferenceIssue]]]) -> MissingReferenceResult:
    """Aggregate per-scene issues; scenes without issues are left out."""
    by_scene = {scene: issues for scene, issues in scene_issues if issues}
    all_issues = [issue for issues in by_scene.values() for issue in issues]
    return MissingReferenceResult(
        scene_issues=by_scene,
        total_broken_references=len(all_issues),
        affected_scenes=len(by_scene),
        missing_asset_types=dict(Counter(issue.asset_type for issue in all_issues)),
    )


def detect_missing_references(scene_files: Iterable[str | Path], index: Mapping[str, Path]) -> MissingReferenceResult:
    """Sequential variant of the reference scan; ``analyze_project`` fans it out."""
    return summarize_references((Path(path).stem, scan_scene_file(path, index)) for path in scene_files)
