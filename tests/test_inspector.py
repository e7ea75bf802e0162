from __future__ import annotations

"""Inspector tests: build small WADs, inspect and validate them."""
from pathlib import Path
import struct

from wadkit.api import inspect_wad, validate_wad

from wad_builder import build_wad, write_wad


def test_inspect_two_lumps_clean(tmp_path: Path):
    path = write_wad(tmp_path, [("PLAYPAL", b"\x00" * 768), ("F_START", b"")])
    info = inspect_wad(path)
    assert info["file_size"] == path.stat().st_size
    assert info["header"]["wad_type"] == "PWAD"
    assert info["header"]["lump_count"] == 2
    entries = info["directory_entries"]
    assert [e["name"] for e in entries] == ["PLAYPAL", "F_START"]
    assert [e["virtual"] for e in entries] == [False, True]
    assert entries[0]["offset"] == 12
    assert validate_wad(path) == []


def test_validate_flags_lump_past_end(tmp_path: Path):
    data = bytearray(build_wad([("DATA", b"\x01\x02\x03\x04")]))
    dir_off = struct.unpack_from("<i", data, 8)[0]
    # grow the declared size of the only lump
    struct.pack_into("<i", data, dir_off + 4, 4096)
    path = tmp_path / "bad.wad"
    path.write_bytes(bytes(data))
    issues = validate_wad(path)
    assert any("DATA" in i and "exceeds file size" in i for i in issues)


def test_validate_flags_negative_offset(tmp_path: Path):
    data = bytearray(build_wad([("DATA", b"\x01")]))
    dir_off = struct.unpack_from("<i", data, 8)[0]
    struct.pack_into("<i", data, dir_off, -8)
    path = tmp_path / "neg.wad"
    path.write_bytes(bytes(data))
    assert any("negative offset" in i for i in validate_wad(path))


def test_overlapping_lumps_are_not_issues(tmp_path: Path):
    data = bytearray(build_wad([("A", b"abcd"), ("B", b"efgh")]))
    dir_off = struct.unpack_from("<i", data, 8)[0]
    # point B at A's bytes
    struct.pack_into("<i", data, dir_off + 16, 12)
    path = tmp_path / "overlap.wad"
    path.write_bytes(bytes(data))
    assert validate_wad(path) == []


def test_validate_reports_directory_past_end(tmp_path: Path):
    data = build_wad([("A", b"abcd"), ("B", b"efgh")])
    path = tmp_path / "cut.wad"
    path.write_bytes(data[:-4])
    info = inspect_wad(path)
    assert info["directory_complete"] is False
    assert info["directory_entries"] == []
    assert validate_wad(path) == ["Directory exceeds file size"]


def test_validate_reports_negative_lump_count(tmp_path: Path):
    path = tmp_path / "neg.wad"
    path.write_bytes(struct.pack("<4sii", b"PWAD", -3, 12))
    assert validate_wad(path) == ["Header declares negative lump count -3"]
