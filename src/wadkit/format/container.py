"""WAD container: header, directory and on-demand lump extraction.

Header layout (12 bytes)::

    4s  identification  "IWAD" or "PWAD"
    i   lump count
    i   directory offset

Directory entry layout (16 bytes, ``lump count`` times from the offset)::

    i   lump offset
    i   lump size
    8s  name (NUL padded)

The container is built once by ``open_wad`` and is read-only afterwards. It
owns the storage stream; lump bytes leave it only as independent copies so
decoders never share state with the container.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from ..logging import get_logger
from .constants import (
    DIRECTORY_ENTRY_SIZE,
    HEADER_SIZE,
    IWAD_MAGIC,
    MAGIC_SIZE,
    NAME_SIZE,
    PWAD_MAGIC,
)
from .cursor import ByteCursor
from .errors import (
    IoFailureError,
    SizeMismatchError,
    TruncatedDirectoryError,
    TruncatedInputError,
    UnrecognizedFormatError,
    VirtualLumpError,
)
from .names import FixedString

__all__ = [
    "WadType",
    "WadHeader",
    "DirectoryEntry",
    "Container",
    "open_wad",
    "read_header",
]


class WadType(Enum):
    IWAD = IWAD_MAGIC
    PWAD = PWAD_MAGIC

    @classmethod
    def from_tag(cls, tag: bytes) -> "WadType":
        for member in cls:
            if member.value == tag:
                return member
        raise UnrecognizedFormatError(
            f"Not a WAD file: identification is {tag!r}", {"tag": tag.hex()}
        )


@dataclass(frozen=True, slots=True)
class WadHeader:
    wad_type: WadType
    lump_count: int
    directory_offset: int


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    offset: int
    size: int
    name: FixedString

    @property
    def is_virtual(self) -> bool:
        """Zero-size marker entries (e.g. ``S_START``) have no backing bytes."""
        return self.size == 0


def _parse_header(raw: bytes) -> WadHeader:
    cur = ByteCursor(raw)
    tag = cur.read_fixed(MAGIC_SIZE)
    wad_type = WadType.from_tag(tag)
    lump_count = cur.read_i32()
    directory_offset = cur.read_i32()
    return WadHeader(wad_type, lump_count, directory_offset)


def _read_exact(storage: BinaryIO, n: int) -> bytes:
    """Read up to ``n`` bytes, looping over short reads until EOF."""
    chunks = []
    remaining = n
    while remaining > 0:
        chunk = storage.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _parse_directory_entry(raw: bytes, index: int) -> DirectoryEntry:
    cur = ByteCursor(raw)
    try:
        offset = cur.read_i32()
        size = cur.read_i32()
        name = FixedString.from_bytes(cur.read_bytes(NAME_SIZE))
    except TruncatedInputError as e:
        raise TruncatedDirectoryError(
            f"Directory entry {index} is incomplete", {"index": index}
        ) from e
    return DirectoryEntry(offset, size, name)


class Container:
    """An opened WAD. Use ``open_wad`` or ``Container.from_path``."""

    def __init__(
        self,
        storage: BinaryIO,
        header: WadHeader,
        entries: tuple[DirectoryEntry, ...],
    ) -> None:
        self._storage = storage
        self.header = header
        self._entries = entries

    @classmethod
    def from_path(cls, path: str | Path) -> "Container":
        f = open(path, "rb")
        try:
            return open_wad(f)
        except BaseException:
            f.close()
            raise

    @property
    def wad_type(self) -> WadType:
        return self.header.wad_type

    def directory(self) -> tuple[DirectoryEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DirectoryEntry]:
        return iter(self._entries)

    def find(self, name: str) -> Optional[DirectoryEntry]:
        """Return the last entry named ``name`` (later lumps override earlier)."""
        wanted = name.upper()
        for entry in reversed(self._entries):
            if str(entry.name).upper() == wanted:
                return entry
        return None

    def read(self, entry: DirectoryEntry, out: bytearray | memoryview) -> None:
        """Fill ``out`` with the bytes of ``entry``.

        ``out`` must be exactly ``entry.size`` bytes. Virtual entries have no
        bytes and must not be passed here.
        """
        if entry.is_virtual:
            raise VirtualLumpError(
                f"Lump {entry.name} is a virtual marker and cannot be read",
                {"name": str(entry.name)},
            )
        view = memoryview(out).cast("B")
        if view.readonly:
            raise IoFailureError(
                f"Buffer for lump {entry.name} is read-only",
                {"name": str(entry.name)},
            )
        if len(view) != entry.size:
            raise SizeMismatchError(
                f"Buffer of {len(view)} bytes for lump {entry.name} "
                f"of {entry.size} bytes",
                {"name": str(entry.name), "buffer": len(view), "size": entry.size},
            )
        ctx = {"name": str(entry.name), "offset": entry.offset, "size": entry.size}
        if entry.offset < 0:
            raise IoFailureError(f"Lump {entry.name} has a negative offset", ctx)
        try:
            self._storage.seek(entry.offset)
            filled = 0
            while filled < entry.size:
                n = self._storage.readinto(view[filled:])
                if not n:
                    break
                filled += n
        except (OSError, ValueError) as e:
            raise IoFailureError(f"Failed reading lump {entry.name}: {e}", ctx) from e
        if filled != entry.size:
            raise IoFailureError(
                f"Short read for lump {entry.name}: {filled} of {entry.size} bytes",
                {**ctx, "read": filled},
            )

    def read_lump(self, entry: DirectoryEntry) -> bytes:
        """Return an owned copy of the bytes of ``entry``."""
        buf = bytearray(max(entry.size, 0))
        self.read(entry, buf)
        return bytes(buf)

    def close(self) -> None:
        self._storage.close()

    def __enter__(self) -> "Container":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_wad(storage: BinaryIO) -> Container:
    """Decode the header and directory of ``storage`` and take ownership of it."""
    logger = get_logger()
    header = read_header(storage)
    if header.lump_count < 0 or header.directory_offset < 0:
        raise TruncatedDirectoryError(
            "Header declares a negative lump count or directory offset",
            {
                "lump_count": header.lump_count,
                "directory_offset": header.directory_offset,
            },
        )
    storage.seek(header.directory_offset)
    entries = []
    for i in range(header.lump_count):
        raw = _read_exact(storage, DIRECTORY_ENTRY_SIZE)
        entries.append(_parse_directory_entry(raw, i))
    logger.debug(
        "Loaded %s directory: %d lumps at offset %d",
        header.wad_type.name,
        header.lump_count,
        header.directory_offset,
    )
    return Container(storage, header, tuple(entries))


def read_header(storage: BinaryIO) -> WadHeader:
    """Decode only the 12-byte header at the start of ``storage``."""
    storage.seek(0)
    return _parse_header(_read_exact(storage, HEADER_SIZE))
