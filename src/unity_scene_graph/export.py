"""Write analysis results to the output folder."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

from unity_scene_graph.core.scripts import script_guid
from unity_scene_graph.models import ProjectAnalysis, SceneAnalysisResult, ScriptInfo

DUMP_SUFFIX = ".dump"
UNUSED_SCRIPTS_FILE = "UnusedScripts.csv"
JSON_EXPORT_FILE = "UnityProjectAnalysis.json"


def write_scene_dumps(scenes: Iterable[SceneAnalysisResult], output_dir: Path) -> list[Path]:
    """One ``<Scene>.unity.dump`` file per scene holding the indented hierarchy."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for scene in scenes:
        dump_path = output_dir / f"{scene.scene_name}{DUMP_SUFFIX}"
        dump_path.write_text(scene.hierarchy, encoding="utf-8")
        written.append(dump_path)
    return written


def write_unused_scripts_csv(unused_scripts: Iterable[ScriptInfo], output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / UNUSED_SCRIPTS_FILE
    with csv_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["Relative Path", "GUID"])
        for script in unused_scripts:
            writer.writerow([script.relative_path, script_guid(script.file_path)])
    return csv_path


def export_json(analysis: ProjectAnalysis, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / JSON_EXPORT_FILE
    json_path.write_text(analysis.model_dump_json(by_alias=True, exclude_none=True, indent=2), encoding="utf-8")
    return json_path
