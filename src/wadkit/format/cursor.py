"""Forward-only, bounds-checked binary reader.

``ByteCursor`` is the single primitive every decoder in wadkit is built on.
It borrows the caller's buffer through a ``memoryview`` and never copies
except in ``read_fixed``. Lump bytes are untrusted, so every read is checked
and a short read raises ``TruncatedInputError`` instead of slicing short.

After a failed read the cursor is exhausted: nothing further can be read and
``finish()`` succeeds, so a caller can never observe a partially consumed
state and retry.
"""

from __future__ import annotations

import struct

from .errors import OutOfBoundsError, TrailingDataError, TruncatedInputError

__all__ = ["ByteCursor"]

_I16 = struct.Struct("<h")
_I32 = struct.Struct("<i")


class ByteCursor:
    __slots__ = ("_view", "_pos")

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0):
        view = memoryview(data).cast("B")
        if offset < 0 or offset > len(view):
            raise OutOfBoundsError(
                f"Cursor offset {offset} outside buffer of {len(view)} bytes",
                {"offset": offset, "size": len(view)},
            )
        self._view = view
        self._pos = offset

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    def has_remaining(self) -> bool:
        return self._pos < len(self._view)

    def read_bytes(self, n: int) -> memoryview:
        """Return the next ``n`` bytes as a view into the borrowed buffer."""
        end = self._pos + n
        if n < 0 or end > len(self._view):
            want, have, at = n, self.remaining, self._pos
            self._pos = len(self._view)
            raise TruncatedInputError(
                f"Read of {want} bytes at offset {at} exceeds {have} remaining",
                {"offset": at, "requested": want, "remaining": have},
            )
        chunk = self._view[self._pos : end]
        self._pos = end
        return chunk

    def read_fixed(self, n: int) -> bytes:
        return bytes(self.read_bytes(n))

    def read_i16(self) -> int:
        return _I16.unpack(self.read_bytes(2))[0]

    def read_i32(self) -> int:
        return _I32.unpack(self.read_bytes(4))[0]

    def finish(self) -> None:
        if self.has_remaining():
            raise TrailingDataError(
                f"{self.remaining} unread bytes after offset {self._pos}",
                {"offset": self._pos, "remaining": self.remaining},
            )
