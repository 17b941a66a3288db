import pytest

from darkalliance.text import scale_color, to_wide


@pytest.mark.parametrize("color", [0x80464646, 0x80408080, 0x3F000000, 0xFFFFFFFF, 0])
def test_scale_by_one_is_identity(color):
    assert scale_color(1.0, color) == color


@pytest.mark.parametrize("color", [0x80464646, 0x12345678])
def test_scale_by_zero_keeps_alpha(color):
    assert scale_color(0.0, color) == color & 0xFF000000


def test_negative_scale_clamps_to_zero():
    color = 0x12345678
    assert scale_color(-1.0, color) == color & 0xFF000000


def test_half_scale():
    assert scale_color(0.5, 0x80464646) == 0x80232323


def test_overflow_wraps():
    assert scale_color(2.0, 0x80808080) == 0x80000000


@pytest.mark.parametrize("scale", [0.25, 0.5, 0.75])
def test_dimming_never_brightens(scale):
    color = 0x80A0B0C0
    result = scale_color(scale, color)
    for shift in (0, 8, 16):
        assert (result >> shift) & 0xFF <= (color >> shift) & 0xFF
    assert result & 0xFF000000 == color & 0xFF000000


def test_to_wide_latin1():
    word = "Fran\xe7ais"
    assert to_wide(word) == [ord(c) for c in word]


def test_to_wide_stops_at_nul():
    assert to_wide(b"ab\0cd") == list(b"ab")


def test_to_wide_rejects_wide_chars():
    with pytest.raises(UnicodeEncodeError):
        to_wide("\u4e2d")