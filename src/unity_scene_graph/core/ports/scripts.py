from pathlib import Path
from typing import Protocol

from unity_scene_graph.models import ScriptInfo


class ScriptModelProvider(Protocol):
    def analyze_script(self, path: Path) -> ScriptInfo | None: ...
