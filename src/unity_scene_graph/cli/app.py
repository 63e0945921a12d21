import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from unity_scene_graph.cli.analyze import analyze
from unity_scene_graph.cli.hierarchy import hierarchy
from unity_scene_graph.cli.references import references

app = typer.Typer(
    name="unity-scene-graph",
    help="Unity scene graph: rebuild scene hierarchies and find broken asset references.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("analyze")(analyze)
app.command("hierarchy")(hierarchy)
app.command("references")(references)


def main() -> None:
    app()
