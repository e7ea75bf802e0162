"""PLAYPAL: any number of 256-color RGB palettes, 768 bytes each."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ..format.constants import COLOR_SIZE, COLORS_PER_PALETTE, PALETTE_SIZE
from ..format.cursor import ByteCursor
from ..format.errors import InvalidLengthError
from ..logging import get_logger

__all__ = ["Color", "Palette", "PaletteLump", "decode_palette"]


@dataclass(frozen=True, slots=True)
class Color:
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True, slots=True)
class Palette:
    colors: tuple[Color, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]


@dataclass(frozen=True, slots=True)
class PaletteLump:
    palettes: tuple[Palette, ...]

    def to_dict(self) -> Dict[str, Any]:
        out: List[List[List[int]]] = [
            [list(c.as_tuple()) for c in p.colors] for p in self.palettes
        ]
        return {"count": len(self.palettes), "palettes": out}


def decode_palette(data: bytes | bytearray | memoryview) -> PaletteLump:
    size = len(data)
    if size % PALETTE_SIZE:
        raise InvalidLengthError(
            f"PLAYPAL size {size} is not a multiple of {PALETTE_SIZE}",
            {"size": size},
        )
    cur = ByteCursor(data)
    palettes = []
    while cur.has_remaining():
        colors = []
        for _ in range(COLORS_PER_PALETTE):
            r, g, b = cur.read_bytes(COLOR_SIZE)
            colors.append(Color(r, g, b))
        palettes.append(Palette(tuple(colors)))
    get_logger().debug("Decoded %d palettes", len(palettes))
    return PaletteLump(tuple(palettes))
