"""Fixed 8-byte ASCII identifiers used for lump, texture and patch names."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import NAME_SIZE
from .errors import InvalidCharacterError, InvalidLengthError

__all__ = ["FixedString"]


@dataclass(frozen=True, slots=True)
class FixedString:
    """Exactly eight raw bytes, all ASCII, rendered up to the first NUL.

    Validity is checked once in ``from_bytes``; rendering never re-checks.
    """

    raw: bytes

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "FixedString":
        raw = bytes(data)
        if len(raw) != NAME_SIZE:
            raise InvalidLengthError(
                f"Name must be {NAME_SIZE} bytes, got {len(raw)}",
                {"size": len(raw)},
            )
        for i, b in enumerate(raw):
            if b > 127:
                raise InvalidCharacterError(
                    f"Non-ASCII byte 0x{b:02x} at position {i} in name {raw!r}",
                    {"position": i, "byte": b},
                )
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> "FixedString":
        try:
            encoded = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidCharacterError(
                f"Non-ASCII character in name {text!r}",
                {"position": e.start},
            ) from e
        if len(encoded) > NAME_SIZE:
            raise InvalidLengthError(
                f"Name {text!r} longer than {NAME_SIZE} bytes",
                {"size": len(encoded)},
            )
        return cls.from_bytes(encoded.ljust(NAME_SIZE, b"\x00"))

    def __str__(self) -> str:
        end = self.raw.find(b"\x00")
        if end == -1:
            end = NAME_SIZE
        return self.raw[:end].decode("ascii")
