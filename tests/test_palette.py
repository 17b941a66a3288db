import struct

import pytest

from darkalliance.palette import Palette


def test_from_bytes_round_trip():
    values = [0x80000000, 0x80FF00FF, 0x12345678, 0]
    palette = Palette.from_bytes(struct.pack("<4I", *values), 2, 2)
    assert palette.entries == values
    assert palette.num_entries == len(values)


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        Palette.from_bytes(b"\x00" * 12, 2, 2)


def test_value_is_signed():
    palette = Palette([0xFFFFFFFF, 0x7FFFFFFF])
    assert palette.value(0) == -1
    assert palette.value(1) == 0x7FFFFFFF


def test_lookup_found_and_missing():
    palette = Palette([10, 20, 30])
    assert palette.lookup(20) == 1
    assert palette.lookup(99) == len(palette)


def test_lookup_empty_palette():
    assert Palette().lookup(5) == 0


def test_unswizzle_swaps_middle_blocks():
    palette = Palette(range(256))
    palette.unswizzle()
    assert palette.entries[0:8] == list(range(0, 8))
    assert palette.entries[8:16] == list(range(16, 24))
    assert palette.entries[16:24] == list(range(8, 16))
    assert palette.entries[24:32] == list(range(24, 32))
    assert sorted(palette.entries) == list(range(256))


def test_unswizzle_is_involution():
    original = list(range(1000, 1256))
    palette = Palette(original)
    palette.unswizzle()
    palette.unswizzle()
    assert palette.entries == original


def test_unswizzle_ignores_small_palettes():
    palette = Palette(range(16))
    palette.unswizzle()
    assert palette.entries == list(range(16))