"""Split Unity YAML scene text into typed sub-documents."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GAME_OBJECT_TYPE = 1
TRANSFORM_TYPE = 4
MONO_BEHAVIOUR_TYPE = 114
RECT_TRANSFORM_TYPE = 224

TRANSFORM_TYPES = frozenset({TRANSFORM_TYPE, RECT_TRANSFORM_TYPE})

# Unity writes {fileID: 0} for "no object"; never a real identifier.
NO_REFERENCE = "0"

_BOUNDARY = "---"
_HEADER_RE = re.compile(r"^!u!(\d+)\s+&(\S+)")
_FILE_ID_RE = re.compile(r"fileID:\s*([^,}\s]+)")


@dataclass(frozen=True)
class Record:
    type_id: int
    file_id: str
    body: tuple[str, ...]

    @property
    def is_game_object(self) -> bool:
        return self.type_id == GAME_OBJECT_TYPE

    @property
    def is_transform(self) -> bool:
        return self.type_id in TRANSFORM_TYPES

    @property
    def is_mono_behaviour(self) -> bool:
        return self.type_id == MONO_BEHAVIOUR_TYPE

    def field(self, name: str) -> str | None:
        """Return the raw value of the first ``name:`` line, or None."""
        prefix = f"{name}:"
        for line in self.body:
            trimmed = line.strip()
            if trimmed.startswith(prefix):
                return trimmed[len(prefix) :].strip()
        return None


def parse_header(header: str) -> tuple[int, str] | None:
    """Parse ``!u!<type> &<fileID>`` into ``(type_id, file_id)``."""
    match = _HEADER_RE.match(header.strip())
    if match is None:
        return None
    return int(match.group(1)), match.group(2)


def extract_file_id(line: str) -> str | None:
    match = _FILE_ID_RE.search(line)
    return match.group(1) if match else None


def split_documents(text: str) -> list[Record]:
    """Partition scene text on ``---`` boundaries into records.

    Anything before the first boundary (``%YAML``/``%TAG`` directives) and
    fragments with an unparseable header are dropped.
    """
    records: list[Record] = []
    header: str | None = None
    body: list[str] = []

    def _flush() -> None:
        if header is None:
            return
        parsed = parse_header(header)
        if parsed is None:
            if header.strip() or any(line.strip() for line in body):
                logger.debug("Dropping sub-document with unparseable header %r", header)
            return
        type_id, file_id = parsed
        records.append(Record(type_id=type_id, file_id=file_id, body=tuple(body)))

    for line in text.splitlines():
        if line.startswith(_BOUNDARY):
            _flush()
            header = line[len(_BOUNDARY) :]
            body = []
        elif header is not None:
            body.append(line)
    _flush()
    return records


def read_scene_text(path: str | Path) -> str:
    """Read a scene as UTF-8; an unreadable file contributes empty text."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return ""
