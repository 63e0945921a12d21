import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from unity_scene_graph.core.analyze import analyze_project
from unity_scene_graph.core.settings import AnalyzerSettings
from unity_scene_graph.export import export_json, write_scene_dumps, write_unused_scripts_csv

console = Console()


def analyze(
    project: Annotated[Path, typer.Argument(help="Path to the Unity project root.")],
    output: Annotated[Path, typer.Argument(help="Folder for dumps and reports.")],
    json: Annotated[bool, typer.Option("--json", help="Also export the full analysis as JSON.")] = False,
    max_workers: Annotated[int | None, typer.Option(min=1, help="Concurrent file workers.")] = None,
) -> None:
    """Dump every scene hierarchy and report unused scripts and broken references."""
    settings = AnalyzerSettings.from_env()
    if max_workers is not None:
        settings = settings.model_copy(update={"max_workers": max_workers})

    try:
        with console.status("Analyzing project..."):
            analysis = asyncio.run(analyze_project(project, settings))
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None

    write_scene_dumps(analysis.scenes, output)
    write_unused_scripts_csv(analysis.unused_scripts, output)
    console.print(f"[green]Wrote[/green] {len(analysis.scenes)} scene dumps to {output}")

    missing = analysis.missing_references
    if missing.total_broken_references:
        console.print(
            f"[yellow]Found {missing.total_broken_references} broken references "
            f"in {missing.affected_scenes} scenes[/yellow]"
        )
    else:
        console.print("[green]No missing references found[/green]")

    if analysis.unused_scripts:
        console.print(f"[yellow]Found {len(analysis.unused_scripts)} unused scripts[/yellow]")
    else:
        console.print("[green]No unused scripts found[/green]")

    if json:
        json_path = export_json(analysis, output)
        console.print(f"[green]Exported[/green] {json_path}")
