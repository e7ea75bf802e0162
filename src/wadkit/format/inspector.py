"""WAD inspection utilities.

Public functions:
- inspect_wad(path) -> dict
- validate_wad(info) -> list[str]

``inspect_wad`` produces a JSON-serialisable description of the header and
directory; ``validate_wad`` checks it against the file size. Lumps that
overlap each other are legal (several WAD tools share bytes between lumps)
and are not reported.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from .constants import DIRECTORY_ENTRY_SIZE
from .container import Container, WadHeader, read_header
from .errors import TruncatedDirectoryError

__all__ = ["inspect_wad", "inspect_container", "validate_wad"]


def _describe_header(header: WadHeader) -> Dict[str, Any]:
    return {
        "wad_type": header.wad_type.name,
        "lump_count": header.lump_count,
        "directory_offset": header.directory_offset,
        "directory_size": header.lump_count * DIRECTORY_ENTRY_SIZE,
    }


def inspect_container(container: Container, file_size: int) -> Dict[str, Any]:
    entries = [
        {
            "index": i,
            "name": str(e.name),
            "offset": e.offset,
            "size": e.size,
            "virtual": e.is_virtual,
        }
        for i, e in enumerate(container.directory())
    ]
    return {
        "file_size": file_size,
        "header": _describe_header(container.header),
        "directory_complete": True,
        "directory_entries": entries,
    }


def inspect_wad(path: str | Path) -> Dict[str, Any]:
    """Describe the WAD at ``path``.

    A directory that does not fit in the file is described from the header
    alone, with ``directory_complete`` false and no entries, so that
    ``validate_wad`` can report it.
    """
    p = Path(path)
    file_size = p.stat().st_size
    try:
        with Container.from_path(p) as container:
            return inspect_container(container, file_size)
    except TruncatedDirectoryError:
        with open(p, "rb") as f:
            header = read_header(f)
    return {
        "file_size": file_size,
        "header": _describe_header(header),
        "directory_complete": False,
        "directory_entries": [],
    }


def validate_wad(info: Dict[str, Any]) -> List[str]:
    issues: List[str] = []
    file_size = info["file_size"]
    header = info["header"]
    if header["lump_count"] < 0:
        issues.append(f"Header declares negative lump count {header['lump_count']}")
    if header["directory_offset"] < 0:
        issues.append(
            f"Header declares negative directory offset {header['directory_offset']}"
        )
    dir_end = header["directory_offset"] + max(header["directory_size"], 0)
    if dir_end > file_size:
        issues.append("Directory exceeds file size")
    for e in info.get("directory_entries", []):
        label = f"Lump {e['index']} ({e['name']})"
        if e["offset"] < 0:
            issues.append(f"{label} has negative offset {e['offset']}")
        if e["size"] < 0:
            issues.append(f"{label} has negative size {e['size']}")
        if e["virtual"]:
            continue
        if e["offset"] + e["size"] > file_size:
            issues.append(f"{label} exceeds file size")
    return issues
