import struct

import pytest

from darkalliance.data_util import ByteReader, le_float, le_int, le_short, le_ushort


def test_static_readers_round_trip():
    data = struct.pack("<ihHf", -123456, -7, 0xCF0, 1.5)
    assert le_int(data, 0) == -123456
    assert le_short(data, 4) == -7
    assert le_ushort(data, 6) == 0xCF0
    assert le_float(data, 8) == 1.5


def test_short_sign():
    data = b"\xff\xff"
    assert le_short(data, 0) == -1
    assert le_ushort(data, 0) == 0xFFFF


def test_reader_sequence_and_offset():
    data = b"\x00" * 3 + struct.pack("<fiHh", -2.25, 0x3310, 65000, -300)
    reader = ByteReader(data, 3)
    assert reader.read_float() == -2.25
    assert reader.read_int() == 0x3310
    assert reader.read_ushort() == 65000
    assert reader.read_short() == -300
    assert reader.offset == len(data)


def test_reader_short_matches_ushort_bits():
    data = struct.pack("<H", 0x8001)
    assert ByteReader(data, 0).read_short() == struct.unpack("<h", data)[0]


def test_reading_past_end_raises():
    reader = ByteReader(b"\x01\x02", 0)
    with pytest.raises(ValueError):
        reader.read_int()
    assert reader.offset == 0


def test_negative_offset_raises():
    with pytest.raises(ValueError):
        le_int(b"\x00" * 8, -4)