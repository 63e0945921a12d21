"""Project-wide asset GUID index built from ``.meta`` sidecar files."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

META_SUFFIX = ".meta"
DEFAULT_ASSETS_DIR = "Assets"


class AssetIndex(Mapping[str, Path]):
    """Read-only GUID -> asset path mapping, shared by all reference scans."""

    def __init__(self, guids: Mapping[str, Path] | None = None) -> None:
        self._guids: dict[str, Path] = dict(guids or {})

    def __getitem__(self, guid: str) -> Path:
        return self._guids[guid]

    def __iter__(self) -> Iterator[str]:
        return iter(self._guids)

    def __len__(self) -> int:
        return len(self._guids)

    def __repr__(self) -> str:
        return f"AssetIndex({len(self._guids)} assets)"


def extract_guid(meta_text: str) -> str:
    for line in meta_text.splitlines():
        if line.startswith("guid:"):
            return line[len("guid:") :].strip()
    return ""


def read_meta_guid(meta_path: Path) -> str:
    try:
        return extract_guid(meta_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping unreadable sidecar %s: %s", meta_path, exc)
        return ""


def asset_path_for_meta(meta_path: Path) -> Path:
    return meta_path.with_name(meta_path.name[: -len(META_SUFFIX)])


def build_asset_index(project_path: str | Path, assets_dir: str = DEFAULT_ASSETS_DIR) -> AssetIndex:
    """Scan ``<project>/<assets_dir>/**/*.meta``; duplicate GUIDs keep the last file seen."""
    assets_path = Path(project_path) / assets_dir
    if not assets_path.is_dir():
        logger.warning("No %s directory under %s; asset index is empty", assets_dir, project_path)
        return AssetIndex()

    guids: dict[str, Path] = {}
    for meta_path in sorted(assets_path.rglob(f"*{META_SUFFIX}")):
        if not meta_path.is_file():
            continue
        if meta_path.name == META_SUFFIX:
            logger.debug("Skipping sidecar %s without an asset name", meta_path)
            continue
        guid = read_meta_guid(meta_path)
        if guid:
            guids[guid] = asset_path_for_meta(meta_path)

    logger.info("Indexed %d asset GUIDs under %s", len(guids), assets_path)
    return AssetIndex(guids)


def assets_relative_path(path: Path, assets_dir: str = DEFAULT_ASSETS_DIR) -> str:
    """Path starting at the assets folder (``Assets/Scripts/Foo.cs``), else the bare file name."""
    parts = path.parts
    if assets_dir in parts:
        return "/".join(parts[parts.index(assets_dir) :])
    return path.name
