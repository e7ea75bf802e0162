"""PNAMES: ``i32`` count followed by that many 8-byte patch names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..format.constants import NAME_SIZE
from ..format.cursor import ByteCursor
from ..format.errors import InvalidLengthError
from ..format.names import FixedString
from ..logging import get_logger

__all__ = ["NameTable", "decode_names"]


@dataclass(frozen=True, slots=True)
class NameTable:
    names: tuple[FixedString, ...]

    def __len__(self) -> int:
        return len(self.names)

    def __getitem__(self, index: int) -> FixedString:
        return self.names[index]

    def get(self, index: int) -> Optional[FixedString]:
        """Name at ``index``, or None when a texture references a missing slot."""
        if 0 <= index < len(self.names):
            return self.names[index]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"count": len(self.names), "names": [str(n) for n in self.names]}


def decode_names(
    data: bytes | bytearray | memoryview, *, strict: bool = True
) -> NameTable:
    """Decode a PNAMES lump; ``strict`` rejects bytes after the last name."""
    cur = ByteCursor(data)
    count = cur.read_i32()
    if count < 0:
        raise InvalidLengthError(
            f"PNAMES declares negative count {count}", {"count": count}
        )
    names = tuple(
        FixedString.from_bytes(cur.read_bytes(NAME_SIZE)) for _ in range(count)
    )
    if strict:
        cur.finish()
    get_logger().debug("Decoded %d patch names", count)
    return NameTable(names)
