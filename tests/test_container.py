import io
import struct

import pytest

from wadkit.format.container import (
    Container,
    DirectoryEntry,
    WadType,
    open_wad,
)
from wadkit.format.errors import (
    IoFailureError,
    SizeMismatchError,
    TruncatedDirectoryError,
    TruncatedInputError,
    UnrecognizedFormatError,
    VirtualLumpError,
)
from wadkit.format.names import FixedString

from wad_builder import build_wad, write_wad


def _open(data: bytes) -> Container:
    return open_wad(io.BytesIO(data))


def test_wad_type_from_tag():
    assert WadType.from_tag(b"IWAD") is WadType.IWAD
    assert WadType.from_tag(b"PWAD") is WadType.PWAD
    with pytest.raises(UnrecognizedFormatError):
        WadType.from_tag(b"ZWAD")


@pytest.mark.parametrize("tag", [b"ZWAD", b"iwad", b"WAD2", b"\x00\x00\x00\x00"])
def test_unrecognized_tag(tag):
    data = build_wad([("PLAYPAL", b"\x01\x02")], tag=tag)
    with pytest.raises(UnrecognizedFormatError):
        _open(data)


def test_short_header():
    with pytest.raises(TruncatedInputError):
        _open(b"IWAD\x01\x00")


def test_directory_order_and_virtual():
    wad = _open(
        build_wad(
            [
                ("PLAYPAL", b"\x00" * 768),
                ("S_START", b""),
                ("TROOA1", b"\x07" * 5),
                ("S_END", b""),
            ],
            tag=b"IWAD",
        )
    )
    assert wad.wad_type is WadType.IWAD
    names = [str(e.name) for e in wad.directory()]
    assert names == ["PLAYPAL", "S_START", "TROOA1", "S_END"]
    assert [e.is_virtual for e in wad] == [False, True, False, True]
    assert len(wad) == 4


def test_is_virtual_only_for_zero_size():
    marker = DirectoryEntry(0, 0, FixedString.from_str("S_START"))
    lump = DirectoryEntry(12, 10752, FixedString.from_str("PLAYPAL"))
    assert marker.is_virtual
    assert not lump.is_virtual


def test_truncated_directory():
    data = build_wad([("A", b"\x01"), ("B", b"\x02")])
    with pytest.raises(TruncatedDirectoryError):
        _open(data[:-5])


def test_directory_count_beyond_file():
    header = struct.pack("<4sii", b"PWAD", 1000, 12)
    with pytest.raises(TruncatedDirectoryError):
        _open(header + b"\x00" * 16)


def test_negative_lump_count():
    header = struct.pack("<4sii", b"PWAD", -1, 12)
    with pytest.raises(TruncatedDirectoryError):
        _open(header)


def test_read_fills_buffer():
    wad = _open(build_wad([("ONE", b"abc"), ("TWO", b"defgh")]))
    entry = wad.directory()[1]
    buf = bytearray(entry.size)
    wad.read(entry, buf)
    assert bytes(buf) == b"defgh"
    assert wad.read_lump(wad.directory()[0]) == b"abc"


def test_read_size_mismatch():
    wad = _open(build_wad([("ONE", b"abc")]))
    entry = wad.directory()[0]
    with pytest.raises(SizeMismatchError):
        wad.read(entry, bytearray(2))
    with pytest.raises(SizeMismatchError):
        wad.read(entry, bytearray(4))


def test_read_virtual_rejected():
    wad = _open(build_wad([("F_START", b"")]))
    with pytest.raises(VirtualLumpError):
        wad.read(wad.directory()[0], bytearray())


def test_read_short_storage():
    data = build_wad([("ONE", b"abc")])
    wad = _open(data)
    bogus = DirectoryEntry(len(data) - 2, 10, FixedString.from_str("BOGUS"))
    with pytest.raises(IoFailureError):
        wad.read(bogus, bytearray(10))


def test_read_copy_outlives_container(tmp_path):
    path = write_wad(tmp_path, [("DATA", b"\x01\x02\x03")])
    with Container.from_path(path) as wad:
        data = wad.read_lump(wad.find("data"))
    assert data == b"\x01\x02\x03"


def test_find_prefers_last_entry():
    wad = _open(build_wad([("PNAMES", b"old"), ("PNAMES", b"newer")]))
    assert wad.read_lump(wad.find("PNAMES")) == b"newer"
    assert wad.find("MISSING") is None


class _Trickle(io.RawIOBase):
    """Seekable raw stream that hands out at most ``chunk`` bytes per call."""

    def __init__(self, data: bytes, chunk: int = 5):
        self._buf = io.BytesIO(data)
        self._chunk = chunk

    def readable(self):
        return True

    def seekable(self):
        return True

    def seek(self, pos, whence=io.SEEK_SET):
        return self._buf.seek(pos, whence)

    def tell(self):
        return self._buf.tell()

    def readinto(self, b):
        data = self._buf.read(min(len(b), self._chunk))
        b[: len(data)] = data
        return len(data)


def test_open_wad_tolerates_short_reads():
    wad = open_wad(_Trickle(build_wad([("PNAMES", b"\0" * 12), ("TWO", b"abcdefg")])))
    assert [str(e.name) for e in wad] == ["PNAMES", "TWO"]
    assert wad.read_lump(wad.find("TWO")) == b"abcdefg"


def test_read_rejects_read_only_buffer():
    wad = _open(build_wad([("ONE", b"abcd")]))
    with pytest.raises(IoFailureError):
        wad.read(wad.directory()[0], bytes(4))
