from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from unity_scene_graph.core.scene import parse_scene_file

console = Console()


def hierarchy(
    scene: Annotated[Path, typer.Argument(help="Path to a .unity scene file.")],
    flat: Annotated[bool, typer.Option("--flat", help="Show the flattened object table instead of the dump.")] = False,
) -> None:
    """Print the GameObject hierarchy of one scene."""
    if not scene.is_file():
        console.print(f"[red]Scene file not found: {scene}[/red]")
        raise typer.Exit(1)

    result = parse_scene_file(scene)
    if not flat:
        console.print(result.hierarchy, markup=False, highlight=False)
        return

    table = Table(show_lines=False)
    for header in ("name", "depth", "file_id", "parent_id"):
        table.add_column(header)
    for info in result.game_objects:
        table.add_row(info.name, str(info.depth), info.file_id, info.parent_id or "")
    console.print(table)
    console.print(f"({len(result.game_objects)} rows)")
