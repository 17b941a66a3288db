"""VIF mesh header parsing and mesh-mask helpers."""

import enum
import struct
from dataclasses import dataclass, field

from .data_util import le_short

_U64 = (1 << 64) - 1
_HEADER = struct.Struct("<iiQHb3xHIIbB")
_CHANGE_DEF = struct.Struct("<QQ")
_HAS_CHANGE_DEFS = 0x2


class VifFlags(enum.IntFlag):
    HAS_ALPHA2 = 0x10
    FLAG_20 = 0x20
    FLAG_40 = 0x40


@dataclass
class VifData:
    """Header of a VIF mesh blob, keeping the raw bytes for table lookups."""

    field0: int
    field1: int
    mesh_mask: int
    flags: int
    num_changes: int
    pad2: int
    alpha_reg_lo: int
    alpha_reg_hi: int
    alpha2_fix_val: int
    change_defs_offset: int
    raw: bytes = field(default=b"", repr=False)

    @classmethod
    def from_bytes(cls, data):
        if len(data) < _HEADER.size:
            raise ValueError(f"VIF header needs {_HEADER.size} bytes, got {len(data)}")
        return cls(*_HEADER.unpack_from(data, 0), raw=bytes(data))


def num_tris_of_selected_vifs(data, mesh_mask):
    """Total triangle count of the sub-meshes whose bits are set in ``mesh_mask``."""
    mesh_mask &= _U64
    base = 0x2C + data.num_changes * 4
    total = 0
    for index in range(max(data.num_changes, 0)):
        if not mesh_mask:
            break
        if mesh_mask & 1:
            total += le_short(data.raw, base + index * 10 + 8)
        mesh_mask >>= 1
    return total


def mesh_mask(data, active_change_items):
    """Mask of visible sub-meshes given the active change items."""
    result = ~data.mesh_mask & _U64
    active = active_change_items & 0xFFFFFFFF
    if data.flags & _HAS_CHANGE_DEFS and active:
        offset = data.change_defs_offset * 0x10
        while active:
            if active & 1:
                try:
                    show, hide = _CHANGE_DEF.unpack_from(data.raw, offset)
                except struct.error as exc:
                    raise ValueError(str(exc)) from None
                result |= show & ~hide & _U64
            active >>= 1
            offset += _CHANGE_DEF.size
    return result