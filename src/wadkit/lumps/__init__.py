"""Decoders for the lump sub-formats, keyed by conventional lump name."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from .colormap import ShadingTable, decode_shading
from .palette import Color, Palette, PaletteLump, decode_palette
from .pnames import NameTable, decode_names
from .textures import Patch, TextureEntry, TextureSet, decode_textures

LumpDecoder = Callable[[bytes], Any]

LUMP_DECODERS: Dict[str, LumpDecoder] = {
    "PLAYPAL": decode_palette,
    "COLORMAP": decode_shading,
    "PNAMES": decode_names,
    "TEXTURE1": decode_textures,
    "TEXTURE2": decode_textures,
}


def decoder_for(name: str) -> Optional[LumpDecoder]:
    return LUMP_DECODERS.get(name.upper())


__all__ = [
    "Color",
    "Palette",
    "PaletteLump",
    "ShadingTable",
    "NameTable",
    "Patch",
    "TextureEntry",
    "TextureSet",
    "decode_palette",
    "decode_shading",
    "decode_names",
    "decode_textures",
    "LUMP_DECODERS",
    "decoder_for",
]
