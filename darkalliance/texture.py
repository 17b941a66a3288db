"""Texture headers and re-encoding of decoded textures as 8-bit indexed images."""

import struct
from dataclasses import dataclass, field
from typing import Optional

from .palette import Palette

BITBLTBUF_OFFSET = 0x470
TRXREG_OFFSET = BITBLTBUF_OFFSET + 0x20
IMAGE_TAG_OFFSET = TRXREG_OFFSET + 0x30
IMAGE_DATA_OFFSET = IMAGE_TAG_OFFSET + 0x10
PSMT8 = 0x13
NUM_SLOTS = 8

# Quadwords in front of the image data: the header area up to IMAGE_DATA_OFFSET.
_LEADING_QWC = IMAGE_DATA_OFFSET // 16


def _div_trunc(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(eq=False)
class TextureHeader:
    """Header of a texture as stored in a lump, with its GIF upload packet."""

    width: int = 0
    height: int = 0
    required_gs_mem: int = 0
    qwc: int = 0
    flags: int = 0
    unk2: int = 0
    tbw: int = 0
    gif_data: Optional[bytearray] = field(default=None, repr=False)
    gif_tag_data: Optional[bytearray] = field(default=None, repr=False)
    gs_alloc_info: object = field(default=None, repr=False)
    reset_frame_no: int = 0
    slot_nodes: list = field(default_factory=lambda: [None] * NUM_SLOTS, repr=False)


@dataclass(eq=False)
class Texture:
    """A decoded texture: 32-bit RGBA pixels plus an optional palette."""

    logical_width: int
    logical_height: int
    width_pixels: int
    height_pixels: int
    data: bytes = field(repr=False)
    palette: Optional[Palette] = None

    @property
    def data_length(self):
        return len(self.data)


def encode(header, texture):
    """Write ``texture`` into the GIF packet of ``header`` as PSMT8 indices.

    Only textures with a 256-entry palette are re-encoded; anything else is
    left untouched. The packet must already be large enough for the data.
    """
    palette = texture.palette
    if palette is None or palette.num_entries != 256:
        return
    gif = header.gif_data
    if gif is None:
        raise ValueError("texture header has no GIF data")

    rrw = texture.width_pixels & 0xFFFF
    rrh = texture.logical_height & 0xFFFF
    pix_len = rrw * rrh
    nloop = (pix_len + 15) // 16
    padding = nloop * 16 - pix_len
    end = IMAGE_DATA_OFFSET + pix_len + padding

    if len(gif) < end:
        raise ValueError(f"GIF data needs {end} bytes, got {len(gif)}")
    if len(texture.data) < pix_len * 4:
        raise ValueError(f"pixel data needs {pix_len * 4} bytes, got {len(texture.data)}")

    dbw = _div_trunc(header.width + 63, 64)
    gif[BITBLTBUF_OFFSET + 7] = PSMT8
    gif[BITBLTBUF_OFFSET + 6] = dbw & 0xFF
    gif[BITBLTBUF_OFFSET + 3] = PSMT8

    struct.pack_into("<H", gif, TRXREG_OFFSET, rrw)
    struct.pack_into("<H", gif, TRXREG_OFFSET + 4, rrh)
    struct.pack_into("<H", gif, IMAGE_TAG_OFFSET, (nloop & 0x7FFF) | 0x8000)

    pixels = struct.unpack_from(f"<{pix_len}I", texture.data)
    indices = bytes(palette.lookup(rgba) & 0xFF for rgba in pixels)
    gif[IMAGE_DATA_OFFSET:end] = indices + bytes(padding)

    header.qwc = (_LEADING_QWC + nloop) & 0xFFFF