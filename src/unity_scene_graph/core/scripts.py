"""Which MonoBehaviour scripts are attached somewhere in the project's scenes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from unity_scene_graph.core.assets import META_SUFFIX, read_meta_guid
from unity_scene_graph.core.documents import NO_REFERENCE, Record
from unity_scene_graph.core.references import extract_guid_from_reference
from unity_scene_graph.models import ScriptInfo

UNKNOWN_GUID = "unknown"


class ScriptCatalog:
    """Class names of analysed scripts, looked up through the asset GUID index."""

    def __init__(self, scripts: Iterable[ScriptInfo], index: Mapping[str, Path]) -> None:
        self._by_path = {Path(script.file_path).resolve(): script for script in scripts}
        self._index = index

    def class_name_for_guid(self, guid: str) -> str | None:
        asset_path = self._index.get(guid)
        if asset_path is None:
            return None
        script = self._by_path.get(asset_path.resolve())
        return script.class_name if script else None


def script_guids(records: Iterable[Record]) -> list[str]:
    guids: list[str] = []
    for record in records:
        for line in record.body:
            trimmed = line.strip()
            if trimmed.startswith("m_Script:") and "guid:" in trimmed:
                guid = extract_guid_from_reference(trimmed)
                if guid and guid != NO_REFERENCE:
                    guids.append(guid)
    return guids


def collect_script_references(guids: Iterable[str], catalog: ScriptCatalog) -> set[str]:
    """Class names of the analysed scripts that *guids* point at."""
    names = (catalog.class_name_for_guid(guid) for guid in guids)
    return {name for name in names if name}


def find_unused_scripts(scripts: Iterable[ScriptInfo], referenced: set[str]) -> list[ScriptInfo]:
    return [script for script in scripts if script.class_name not in referenced]


def script_guid(script_path: str | Path) -> str:
    meta_path = Path(f"{script_path}{META_SUFFIX}")
    if not meta_path.is_file():
        return UNKNOWN_GUID
    return read_meta_guid(meta_path) or UNKNOWN_GUID
