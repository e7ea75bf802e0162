"""TEXTURE1/TEXTURE2 decoding: offset-indirected records."""

import struct

import pytest

from wadkit.format.errors import (
    InvalidLengthError,
    OutOfBoundsError,
    TrailingDataError,
    TruncatedInputError,
)
from wadkit.lumps import decode_names, decode_textures

from wad_builder import patch_record, pnames_lump, texture_lump, texture_record


def test_offset_past_end_fails():
    data = struct.pack("<ii", 1, 64)
    with pytest.raises(OutOfBoundsError) as ei:
        decode_textures(data)
    assert ei.value.context["index"] == 0
    assert ei.value.context["offset"] == 64


def test_offset_at_lump_length_fails():
    data = struct.pack("<ii", 1, 8)
    with pytest.raises(OutOfBoundsError):
        decode_textures(data)


def test_negative_offset_fails():
    rec = texture_record("AASHITTY", 64, 64)
    data = struct.pack("<ii", 1, -4) + rec
    with pytest.raises(OutOfBoundsError):
        decode_textures(data)


def test_record_overlapping_offset_table():
    # offset 4 addresses the offset table itself: the i32 offset becomes the
    # first four bytes of the texture name.
    data = (
        struct.pack("<ii", 1, 4)
        + b"WALL"
        + struct.pack("<ihhih", 0, 64, 128, 0, 2)
        + patch_record(0, 0, 1)
        + patch_record(-32, 16, 513, step_dir=1, colormap=0)
    )
    tex = decode_textures(data)
    assert tex.count == 1
    assert tex.offsets == (4,)
    entry = tex.textures[0]
    assert entry.name.raw == b"\x04\x00\x00\x00WALL"
    assert (entry.width, entry.height) == (64, 128)
    assert entry.patch_count == 2
    assert len(entry.patches) == 2
    p = entry.patches[1]
    assert (p.x_offset, p.y_offset, p.name_index) == (-32, 16, 513)
    assert (p.step_dir, p.colormap) == (1, 0)


def test_contiguous_lump_in_table_order():
    recs = [
        texture_record("STARTAN3", 128, 128, [patch_record(0, 0, 0)]),
        texture_record("BIGDOOR2", 128, 128, [patch_record(0, 0, 1), patch_record(64, 0, 2)]),
    ]
    tex = decode_textures(texture_lump(recs))
    assert [str(t.name) for t in tex.textures] == ["STARTAN3", "BIGDOOR2"]
    assert [t.patch_count for t in tex.textures] == [1, 2]
    assert tex.find("bigdoor2").patches[1].x_offset == 64
    assert tex.find("NOPE") is None


def test_out_of_order_and_shared_offsets():
    first = texture_record("FIRST", 16, 16)
    second = texture_record("SECOND", 32, 8, [patch_record(1, 2, 3)])
    table_end = 4 + 3 * 4
    off_first = table_end
    off_second = table_end + len(first)
    data = (
        struct.pack("<i", 3)
        + struct.pack("<iii", off_second, off_first, off_second)
        + first
        + second
    )
    tex = decode_textures(data)
    assert [str(t.name) for t in tex.textures] == ["SECOND", "FIRST", "SECOND"]
    assert tex.textures[0] == tex.textures[2]


def test_record_past_end_fails():
    rec = texture_record("CUT", 8, 8, [patch_record(0, 0, 0)])
    data = texture_lump([rec])[:-3]
    with pytest.raises(OutOfBoundsError):
        decode_textures(data)


def test_declared_patch_count_past_end_fails():
    rec = texture_record("LIAR", 8, 8, [patch_record(0, 0, 0)])
    # claim 5 patches while only one is present
    rec = rec[:20] + struct.pack("<h", 5) + rec[22:]
    with pytest.raises(OutOfBoundsError):
        decode_textures(texture_lump([rec]))


def test_one_bad_record_fails_whole_lump():
    good = texture_record("GOOD", 8, 8)
    data = struct.pack("<iii", 2, 12, 4096) + good
    with pytest.raises(OutOfBoundsError) as ei:
        decode_textures(data)
    assert ei.value.context["index"] == 1


def test_truncated_offset_table():
    with pytest.raises(TruncatedInputError):
        decode_textures(struct.pack("<ii", 3, 16))


def test_negative_count():
    with pytest.raises(InvalidLengthError):
        decode_textures(struct.pack("<i", -2))


def test_empty_texture_set():
    tex = decode_textures(struct.pack("<i", 0))
    assert tex.count == 0
    assert tex.textures == ()


def test_trailing_padding_tolerated_by_default():
    recs = [texture_record("PADDED", 8, 8) + b"\x00\x00\x00\x00"]
    tex = decode_textures(texture_lump(recs))
    assert str(tex.textures[0].name) == "PADDED"


def test_strict_records_reject_padding():
    recs = [
        texture_record("PADDED", 8, 8) + b"\x00\x00",
        texture_record("NEXT", 8, 8),
    ]
    with pytest.raises(TrailingDataError):
        decode_textures(texture_lump(recs), strict_records=True)


def test_strict_records_accept_contiguous():
    recs = [texture_record("A", 8, 8), texture_record("B", 8, 8, [patch_record(0, 0, 0)])]
    tex = decode_textures(texture_lump(recs), strict_records=True)
    assert len(tex) == 2


def test_to_dict_resolves_patch_names():
    names = decode_names(pnames_lump(["WALL00_1", "WALL00_2"]))
    recs = [texture_record("T", 8, 8, [patch_record(0, 0, 1), patch_record(0, 0, 9)])]
    d = decode_textures(texture_lump(recs)).to_dict(names)
    patches = d["textures"][0]["patches"]
    assert patches[0]["name"] == "WALL00_2"
    assert patches[1]["name"] is None


def test_to_dict_keeps_all_decoded_fields():
    recs = [texture_record("SKY1", 256, 128, [patch_record(0, 0, 0, step_dir=1, colormap=3)], masked=1)]
    tex = decode_textures(texture_lump(recs)).to_dict()["textures"][0]
    assert tex["masked"] == 1
    assert tex["column_directory"] == 0
    assert tex["patches"][0]["step_dir"] == 1
    assert tex["patches"][0]["colormap"] == 3
