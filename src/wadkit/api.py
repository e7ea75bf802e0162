"""High-level API for wadkit.

Thin orchestration over ``format`` and ``lumps`` used by the CLI: open a WAD
from a path, inspect and validate it, decode a named lump, extract raw lumps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .format.container import Container
from .format.inspector import (
    inspect_wad as _inspect_wad_impl,
    validate_wad as _validate_wad_impl,
)
from .logging import get_logger
from .lumps import NameTable, TextureSet, decode_names, decoder_for
from .reporting import extraction, get_reporter
from .utils.paths import lump_file_name, safe_file_path

__all__ = [
    "ExtractResult",
    "open_wad_path",
    "inspect_wad",
    "validate_wad",
    "decode_lump",
    "dump_lump",
    "extract_lumps",
]


@dataclass(slots=True)
class ExtractResult:
    output_dir: Path
    files: List[Path] = field(default_factory=list)
    bytes_written: int = 0
    skipped: int = 0


def open_wad_path(path: str | Path) -> Container:
    return Container.from_path(path)


def inspect_wad(path: str | Path) -> dict:
    return _inspect_wad_impl(path)


def validate_wad(path: str | Path) -> list[str]:
    return _validate_wad_impl(_inspect_wad_impl(path))


def decode_lump(container: Container, name: str) -> Any:
    """Decode the last lump called ``name`` with its registered decoder."""
    decoder = decoder_for(name)
    if decoder is None:
        raise ValueError(f"No decoder registered for lump {name!r}")
    entry = container.find(name)
    if entry is None:
        raise KeyError(f"Lump not found: {name!r}")
    return decoder(container.read_lump(entry))


def dump_lump(path: str | Path, name: str) -> Dict[str, Any]:
    """Decode ``name`` from the WAD at ``path`` into plain data.

    Texture patches are annotated with their PNAMES entry when the WAD has
    one.
    """
    with open_wad_path(path) as container:
        decoded = decode_lump(container, name)
        if isinstance(decoded, TextureSet):
            names: Optional[NameTable] = None
            pnames = container.find("PNAMES")
            if pnames is not None and not pnames.is_virtual:
                names = decode_names(container.read_lump(pnames))
            return decoded.to_dict(names)
        return decoded.to_dict()


def extract_lumps(
    path: str | Path,
    out_dir: str | Path,
    names: Optional[Iterable[str]] = None,
) -> ExtractResult:
    """Write each non-virtual lump (or only those in ``names``) to ``out_dir``.

    Lumps whose file names collide, ignoring case, get their directory index
    appended so that nothing is overwritten on case-insensitive filesystems.
    """
    logger = get_logger()
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    wanted = {n.upper() for n in names} if names is not None else None
    result = ExtractResult(output_dir=out)
    with open_wad_path(path) as container:
        selected = [
            (i, e)
            for i, e in enumerate(container.directory())
            if wanted is None or str(e.name).upper() in wanted
        ]
        used: set[str] = set()
        with extraction(Path(path).name, len(selected)) as rep:
            for index, entry in selected:
                label = str(entry.name)
                if entry.is_virtual:
                    result.skipped += 1
                    rep.marker_skipped(label)
                    continue
                file_name = lump_file_name(label, index)
                if file_name.lower() in used:
                    file_name = lump_file_name(f"{label}.{index}", index)
                used.add(file_name.lower())
                data = container.read_lump(entry)
                target = safe_file_path(out, file_name)
                target.write_bytes(data)
                result.files.append(target)
                result.bytes_written += len(data)
                rep.lump_extracted(label, target.name, len(data))
                logger.debug("Extracted %s -> %s (%d bytes)", label, target.name, len(data))
    get_reporter().summary(
        "extract",
        files=len(result.files),
        bytes=result.bytes_written,
        markers=result.skipped,
    )
    return result
