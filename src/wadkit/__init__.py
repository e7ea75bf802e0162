"""wadkit: read-only decoding of WAD containers and their lumps."""

from .format import (
    ByteCursor,
    Container,
    DirectoryEntry,
    FixedString,
    WadError,
    WadType,
    open_wad,
)
from .lumps import (
    decode_names,
    decode_palette,
    decode_shading,
    decode_textures,
)

__version__ = "0.1.0"

__all__ = [
    "ByteCursor",
    "Container",
    "DirectoryEntry",
    "FixedString",
    "WadError",
    "WadType",
    "open_wad",
    "decode_palette",
    "decode_shading",
    "decode_names",
    "decode_textures",
    "__version__",
]
