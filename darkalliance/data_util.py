"""Little-endian readers for raw game data."""

import struct

_INT = struct.Struct("<i")
_SHORT = struct.Struct("<h")
_USHORT = struct.Struct("<H")
_FLOAT = struct.Struct("<f")


def _unpack(fmt, data, offset):
    if offset < 0:
        raise ValueError(f"negative offset {offset}")
    try:
        return fmt.unpack_from(data, offset)[0]
    except struct.error as exc:
        raise ValueError(str(exc)) from None


def le_int(data, offset):
    """Read a signed 32-bit integer at ``offset``."""
    return _unpack(_INT, data, offset)


def le_short(data, offset):
    """Read a signed 16-bit integer at ``offset``."""
    return _unpack(_SHORT, data, offset)


def le_ushort(data, offset):
    """Read an unsigned 16-bit integer at ``offset``."""
    return _unpack(_USHORT, data, offset)


def le_float(data, offset):
    """Read a 32-bit float at ``offset``."""
    return _unpack(_FLOAT, data, offset)


class ByteReader:
    """Sequential little-endian reader over a byte buffer."""

    def __init__(self, data, offset=0):
        self.data = data
        self.offset = offset

    def _read(self, fmt):
        value = _unpack(fmt, self.data, self.offset)
        self.offset += fmt.size
        return value

    def read_float(self):
        return self._read(_FLOAT)

    def read_int(self):
        return self._read(_INT)

    def read_ushort(self):
        return self._read(_USHORT)

    def read_short(self):
        return self._read(_SHORT)