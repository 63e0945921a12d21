import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from unity_scene_graph.core.analyze import discover_files, run_bounded
from unity_scene_graph.core.assets import build_asset_index
from unity_scene_graph.core.references import scan_scene_file, summarize_references
from unity_scene_graph.core.settings import AnalyzerSettings
from unity_scene_graph.models import MissingReferenceResult

console = Console()


async def _scan(project: Path, settings: AnalyzerSettings) -> MissingReferenceResult:
    index = await asyncio.to_thread(build_asset_index, project, settings.assets_dir)
    scene_files = discover_files(project / settings.assets_dir, settings.scene_suffix)
    semaphore = asyncio.Semaphore(settings.max_workers)
    issues = await run_bounded(lambda path: scan_scene_file(path, index), scene_files, semaphore)
    return summarize_references(zip((p.stem for p in scene_files), issues, strict=True))


def references(
    project: Annotated[Path, typer.Argument(help="Path to the Unity project root.")],
) -> None:
    """List asset references whose GUID no .meta file declares."""
    if not project.is_dir():
        console.print(f"[red]Unity project path does not exist: {project}[/red]")
        raise typer.Exit(1)

    result = asyncio.run(_scan(project, AnalyzerSettings.from_env()))
    if not result.total_broken_references:
        console.print("[green]No missing references found[/green]")
        return

    table = Table(show_lines=False)
    for header in ("scene", "asset_type", "reference", "guid", "description"):
        table.add_column(header)
    for issues in result.scene_issues.values():
        for issue in issues:
            table.add_row(issue.scene_name, issue.asset_type, issue.reference_type, issue.missing_guid, issue.description)
    console.print(table)
    for asset_type, count in sorted(result.missing_asset_types.items()):
        console.print(f"  {asset_type}: {count}")
    console.print(
        f"[yellow]{result.total_broken_references} broken references in {result.affected_scenes} scenes[/yellow]"
    )
    raise typer.Exit(1)
