"""COLORMAP: 34 light-level remap tables of 256 palette indices.

Maps 0-31 darken from full brightness; map 32 is, by convention, the
invulnerability remap and map 33 is unused (all black in the stock IWADs).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..format.constants import (
    INVULNERABILITY_MAP,
    SHADING_MAP_COUNT,
    SHADING_MAP_SIZE,
    SHADING_TABLE_SIZE,
)
from ..format.cursor import ByteCursor
from ..format.errors import InvalidLengthError
from ..logging import get_logger

__all__ = ["ShadingTable", "decode_shading"]


@dataclass(frozen=True, slots=True)
class ShadingTable:
    maps: tuple[bytes, ...]

    @property
    def invulnerability(self) -> bytes:
        return self.maps[INVULNERABILITY_MAP]

    def remap(self, light: int, index: int) -> int:
        return self.maps[light][index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": len(self.maps),
            "maps": [list(m) for m in self.maps],
        }


def decode_shading(
    data: bytes | bytearray | memoryview, *, strict: bool = True
) -> ShadingTable:
    """Decode a COLORMAP lump.

    With ``strict`` (the default) the lump must be exactly 34 * 256 bytes.
    Without it, trailing bytes after the 34th map are ignored; a short lump
    is always rejected.
    """
    size = len(data)
    if size < SHADING_TABLE_SIZE or (strict and size != SHADING_TABLE_SIZE):
        raise InvalidLengthError(
            f"COLORMAP size {size} != {SHADING_TABLE_SIZE}", {"size": size}
        )
    cur = ByteCursor(data)
    maps = tuple(cur.read_fixed(SHADING_MAP_SIZE) for _ in range(SHADING_MAP_COUNT))
    if strict:
        cur.finish()
    get_logger().debug("Decoded %d shading maps", len(maps))
    return ShadingTable(maps)
