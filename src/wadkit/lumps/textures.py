"""TEXTURE1 / TEXTURE2: offset-indirected texture definitions.

Lump layout::

    i32        texture count N
    N * i32    offsets, counted from the start of this lump

Each texture record (at its offset)::

    8s   name
    i32  masked (obsolete)
    i16  width
    i16  height
    i32  column directory (obsolete)
    i16  patch count M
    M * {i16 x, i16 y, i16 patch (PNAMES index), i16 stepdir, i16 colormap}

Offsets are not guaranteed to be increasing, contiguous or disjoint, so each
record is decoded with its own cursor opened at its offset over the whole
lump. Records are decoded in table order.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..format.cursor import ByteCursor
from ..format.errors import (
    InvalidLengthError,
    OutOfBoundsError,
    TruncatedInputError,
)
from ..format.constants import NAME_SIZE
from ..format.names import FixedString
from ..logging import get_logger
from .pnames import NameTable

__all__ = ["Patch", "TextureEntry", "TextureSet", "decode_textures"]


@dataclass(frozen=True, slots=True)
class Patch:
    x_offset: int
    y_offset: int
    name_index: int
    step_dir: int = 0
    colormap: int = 0

    def to_dict(self, names: Optional[NameTable] = None) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "x_offset": self.x_offset,
            "y_offset": self.y_offset,
            "name_index": self.name_index,
            "step_dir": self.step_dir,
            "colormap": self.colormap,
        }
        if names is not None:
            name = names.get(self.name_index)
            out["name"] = str(name) if name is not None else None
        return out


@dataclass(frozen=True, slots=True)
class TextureEntry:
    name: FixedString
    width: int
    height: int
    patch_count: int
    patches: tuple[Patch, ...]
    masked: int = 0
    column_directory: int = 0

    def to_dict(self, names: Optional[NameTable] = None) -> Dict[str, Any]:
        return {
            "name": str(self.name),
            "width": self.width,
            "height": self.height,
            "masked": self.masked,
            "column_directory": self.column_directory,
            "patch_count": self.patch_count,
            "patches": [p.to_dict(names) for p in self.patches],
        }


@dataclass(frozen=True, slots=True)
class TextureSet:
    offsets: tuple[int, ...]
    textures: tuple[TextureEntry, ...]

    @property
    def count(self) -> int:
        return len(self.offsets)

    def __len__(self) -> int:
        return len(self.textures)

    def find(self, name: str) -> Optional[TextureEntry]:
        wanted = name.upper()
        for tex in reversed(self.textures):
            if str(tex.name).upper() == wanted:
                return tex
        return None

    def to_dict(self, names: Optional[NameTable] = None) -> Dict[str, Any]:
        return {
            "count": self.count,
            "offsets": list(self.offsets),
            "textures": [t.to_dict(names) for t in self.textures],
        }


def _record_ends(offsets: tuple[int, ...], size: int) -> Dict[int, int]:
    """Map each offset to the next higher distinct offset (or the lump end)."""
    ordered = sorted(set(o for o in offsets if 0 <= o < size))
    ends: Dict[int, int] = {}
    for o in ordered:
        i = bisect.bisect_right(ordered, o)
        ends[o] = ordered[i] if i < len(ordered) else size
    return ends


def _decode_patch(cur: ByteCursor) -> Patch:
    return Patch(
        x_offset=cur.read_i16(),
        y_offset=cur.read_i16(),
        name_index=cur.read_i16(),
        step_dir=cur.read_i16(),
        colormap=cur.read_i16(),
    )


def _decode_entry(cur: ByteCursor) -> TextureEntry:
    name = FixedString.from_bytes(cur.read_bytes(NAME_SIZE))
    masked = cur.read_i32()
    width = cur.read_i16()
    height = cur.read_i16()
    column_directory = cur.read_i32()
    patch_count = cur.read_i16()
    if patch_count < 0:
        raise OutOfBoundsError(
            f"Texture {name} declares negative patch count {patch_count}",
            {"patch_count": patch_count},
        )
    patches = tuple(_decode_patch(cur) for _ in range(patch_count))
    return TextureEntry(
        name=name,
        width=width,
        height=height,
        patch_count=patch_count,
        patches=patches,
        masked=masked,
        column_directory=column_directory,
    )


def decode_textures(
    data: bytes | bytearray | memoryview, *, strict_records: bool = False
) -> TextureSet:
    """Decode a TEXTURE1/TEXTURE2 lump.

    Any record addressed outside the lump, or whose fields run past the end,
    fails the whole lump with ``OutOfBoundsError``.

    Bytes after a record are tolerated by default: historical lumps pad
    records. With ``strict_records`` each record must end exactly where the
    next higher offset (or the lump) begins, else ``TrailingDataError``.
    """
    view = memoryview(data).cast("B")
    size = len(view)
    cur = ByteCursor(view)
    count = cur.read_i32()
    if count < 0:
        raise InvalidLengthError(
            f"Texture lump declares negative count {count}", {"count": count}
        )
    offsets = tuple(cur.read_i32() for _ in range(count))
    ends = _record_ends(offsets, size) if strict_records else {}

    textures: List[TextureEntry] = []
    for index, offset in enumerate(offsets):
        ctx = {"index": index, "offset": offset, "size": size}
        if offset < 0 or offset >= size:
            raise OutOfBoundsError(
                f"Texture {index} offset {offset} outside lump of {size} bytes",
                ctx,
            )
        region = view[: ends[offset]] if strict_records else view
        rec = ByteCursor(region, offset)
        try:
            textures.append(_decode_entry(rec))
        except TruncatedInputError as e:
            raise OutOfBoundsError(
                f"Texture {index} at offset {offset} extends past its region",
                {**(e.context or {}), **ctx},
            ) from e
        except OutOfBoundsError as e:
            raise OutOfBoundsError(e.message, {**(e.context or {}), **ctx}) from e
        if strict_records:
            rec.finish()
    get_logger().debug(
        "Decoded %d textures (%d offsets)", len(textures), len(offsets)
    )
    return TextureSet(offsets, tuple(textures))
