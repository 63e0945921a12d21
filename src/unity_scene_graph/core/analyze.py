"""Project-level orchestration: fan scenes and scripts out over worker threads."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TypeVar

from unity_scene_graph.core.assets import build_asset_index
from unity_scene_graph.core.components import analyze_components, count_scene_components
from unity_scene_graph.core.documents import read_scene_text, split_documents
from unity_scene_graph.core.ports.scripts import ScriptModelProvider
from unity_scene_graph.core.references import scan_scene_file, summarize_references
from unity_scene_graph.core.scene import analyze_scene_text
from unity_scene_graph.core.scripts import (
    ScriptCatalog,
    collect_script_references,
    find_unused_scripts,
    script_guids,
)
from unity_scene_graph.core.settings import AnalyzerSettings
from unity_scene_graph.models import ProjectAnalysis, SceneAnalysisResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class SceneUnit:
    path: Path
    result: SceneAnalysisResult
    component_counts: dict[str, int]
    script_guids: tuple[str, ...]


async def run_bounded(func: Callable[[T], R], items: Sequence[T], semaphore: asyncio.Semaphore) -> list[R]:
    """Run *func* over *items* in worker threads; results keep the order of *items*."""

    async def _one(item: T) -> R:
        async with semaphore:
            return await asyncio.to_thread(func, item)

    return list(await asyncio.gather(*(_one(item) for item in items)))


def discover_files(root: Path, suffix: str) -> list[Path]:
    if not root.is_dir():
        return []
    return sorted(path for path in root.rglob(f"*{suffix}") if path.is_file())


def analyze_scene(path: Path) -> SceneUnit:
    text = read_scene_text(path)
    records = split_documents(text)
    return SceneUnit(
        path=path,
        result=analyze_scene_text(text, path.name, records),
        component_counts=count_scene_components(records),
        script_guids=tuple(script_guids(records)),
    )


def _default_provider(settings: AnalyzerSettings) -> ScriptModelProvider:
    from unity_scene_graph.parsers.csharp import CSharpScriptModelProvider

    return CSharpScriptModelProvider(settings.assets_dir)


async def analyze_project(
    project_path: str | Path,
    settings: AnalyzerSettings | None = None,
    provider: ScriptModelProvider | None = None,
) -> ProjectAnalysis:
    settings = settings or AnalyzerSettings.from_env()
    project = Path(project_path)
    if not project.is_dir():
        raise FileNotFoundError(f"Unity project path does not exist: {project}")
    provider = provider or _default_provider(settings)

    assets = project / settings.assets_dir
    scene_files = discover_files(assets, settings.scene_suffix)
    script_files = discover_files(assets, settings.script_suffix)
    logger.info("Found %d scene files and %d script files", len(scene_files), len(script_files))

    semaphore = asyncio.Semaphore(settings.max_workers)
    # every reference scan below reads the same finished index
    index, scene_units, script_results = await asyncio.gather(
        asyncio.to_thread(build_asset_index, project, settings.assets_dir),
        run_bounded(analyze_scene, scene_files, semaphore),
        run_bounded(provider.analyze_script, script_files, semaphore),
    )
    logger.info("Parsed %d scenes", len(scene_units))

    scene_issues = await run_bounded(partial(scan_scene_file, index=index), scene_files, semaphore)
    missing_references = summarize_references(zip((p.stem for p in scene_files), scene_issues, strict=True))
    if missing_references.total_broken_references:
        logger.warning(
            "Found %d broken references in %d scenes",
            missing_references.total_broken_references,
            missing_references.affected_scenes,
        )

    scripts = [script for script in script_results if script is not None]
    catalog = ScriptCatalog(scripts, index)
    referenced = collect_script_references((guid for unit in scene_units for guid in unit.script_guids), catalog)
    unused_scripts = find_unused_scripts(scripts, referenced)
    logger.info("Analyzed %d scripts, %d unused", len(scripts), len(unused_scripts))

    return ProjectAnalysis(
        project_path=str(project),
        scenes=[unit.result for unit in scene_units],
        scripts=scripts,
        unused_scripts=unused_scripts,
        components=analyze_components({unit.path.stem: unit.component_counts for unit in scene_units}),
        missing_references=missing_references,
    )
