"""Colour palettes for indexed textures."""

import struct


class Palette:
    """A list of 32-bit RGBA entries (alpha 0x80 is opaque on the target)."""

    def __init__(self, entries=()):
        self.entries = [entry & 0xFFFFFFFF for entry in entries]

    @classmethod
    def from_bytes(cls, data, palw, palh):
        """Read ``palw * palh`` little-endian RGBA words from ``data``."""
        count = palw * palh
        if count < 0:
            raise ValueError("palette dimensions must not be negative")
        if len(data) < count * 4:
            raise ValueError(f"palette needs {count * 4} bytes, got {len(data)}")
        return cls(struct.unpack_from(f"<{count}I", data))

    def __len__(self):
        return len(self.entries)

    @property
    def num_entries(self):
        return len(self.entries)

    def value(self, idx):
        """Return entry ``idx`` as a signed 32-bit integer."""
        entry = self.entries[idx]
        return entry - (1 << 32) if entry & 0x80000000 else entry

    def lookup(self, rgba):
        """Return the index of ``rgba``, or the entry count if absent."""
        try:
            return self.entries.index(rgba & 0xFFFFFFFF)
        except ValueError:
            return len(self.entries)

    def unswizzle(self):
        """Reorder a 256-entry palette from the GS CSM1 layout; others are left alone."""
        if len(self.entries) != 256:
            return
        src = self.entries
        out = []
        for base in range(0, 256, 32):
            out += src[base:base + 8]
            out += src[base + 16:base + 24]
            out += src[base + 8:base + 16]
            out += src[base + 24:base + 32]
        self.entries = out