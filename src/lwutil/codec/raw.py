"""Unchecked fixed-width integer store/load.

These are raw memory-layout primitives: the caller guarantees that ``buffer``
has at least ``offset + 2`` (16-bit) or ``offset + 4`` (32-bit) bytes.

WARNING: nothing here validates its arguments. Values are truncated to the
target width, exactly as a C ``uint16_t``/``uint32_t`` parameter would be, and
a short buffer fails with whatever the buffer protocol raises
(``struct.error``), not with an lwutil exception. Use the varint codec when a
checked API is needed.
"""

from __future__ import annotations

import struct

from ..types import Buffer

_U16_LE = struct.Struct("<H")
_U16_BE = struct.Struct(">H")
_U32_LE = struct.Struct("<I")
_U32_BE = struct.Struct(">I")


def store_u16_le(value: int, buffer: Buffer, offset: int = 0) -> None:
    """Store a 16-bit value in little-endian order."""
    _U16_LE.pack_into(buffer, offset, value & 0xFFFF)


def store_u32_le(value: int, buffer: Buffer, offset: int = 0) -> None:
    """Store a 32-bit value in little-endian order."""
    _U32_LE.pack_into(buffer, offset, value & 0xFFFFFFFF)


def load_u16_le(buffer: Buffer, offset: int = 0) -> int:
    """Load a 16-bit value stored in little-endian order."""
    return _U16_LE.unpack_from(buffer, offset)[0]


def load_u32_le(buffer: Buffer, offset: int = 0) -> int:
    """Load a 32-bit value stored in little-endian order."""
    return _U32_LE.unpack_from(buffer, offset)[0]


def store_u16_be(value: int, buffer: Buffer, offset: int = 0) -> None:
    """Store a 16-bit value in big-endian order."""
    _U16_BE.pack_into(buffer, offset, value & 0xFFFF)


def store_u32_be(value: int, buffer: Buffer, offset: int = 0) -> None:
    """Store a 32-bit value in big-endian order."""
    _U32_BE.pack_into(buffer, offset, value & 0xFFFFFFFF)


def load_u16_be(buffer: Buffer, offset: int = 0) -> int:
    """Load a 16-bit value stored in big-endian order."""
    return _U16_BE.unpack_from(buffer, offset)[0]


def load_u32_be(buffer: Buffer, offset: int = 0) -> int:
    """Load a 32-bit value stored in big-endian order."""
    return _U32_BE.unpack_from(buffer, offset)[0]
