"""Text colour and character helpers."""

import struct


def _f32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def scale_color(scale, color):
    """Scale the three colour channels of an ABGR word, keeping alpha.

    Negative results become zero; results above 0xFF wrap to their low byte.
    """
    color &= 0xFFFFFFFF
    factor = _f32(scale)

    def channel(shift):
        scaled = int(_f32(((color >> shift) & 0xFF) * factor))
        return 0 if scaled < 0 else scaled & 0xFF

    return channel(0) | (color & 0xFF000000) | channel(16) << 16 | channel(8) << 8


def to_wide(text):
    """Widen single-byte characters to 16-bit code units, stopping at NUL."""
    raw = text.encode("latin-1") if isinstance(text, str) else bytes(text)
    return list(raw.split(b"\0", 1)[0])