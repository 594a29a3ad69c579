"""lwutil: Lightweight byte-level utility codecs

A small Python library of primitive byte-level codecs for talking to embedded
devices and compact binary protocols.

Key Features:
- Fixed-width u16/u32 store/load in explicit little- or big-endian order
- LEB128-style varints for unsigned 32-bit integers, with typed errors
- Fixed-width hex ASCII formatting
- Bitmask helpers

Quick Start:
    >>> from lwutil import encode_varint, decode_varint, store_u32_be
    >>> encode_varint(150)
    b'\\x96\\x01'
    >>> decode_varint(b"\\x9e\\xa7\\x05")
    (86942, 3)
    >>> buf = bytearray(4)
    >>> store_u32_be(0x12345678, buf)
    >>> buf.hex()
    '12345678'
"""

from __future__ import annotations

from .codec import (
    decode_varint,
    encode_varint,
    load_u16_be,
    load_u16_le,
    load_u32_be,
    load_u32_le,
    load_u32_varint,
    store_u16_be,
    store_u16_le,
    store_u32_be,
    store_u32_le,
    store_u32_varint,
    varint_size,
)
from .exceptions import (
    BufferTooSmallError,
    DecodeError,
    EncodeError,
    InvalidArgumentError,
    LwutilError,
    TruncatedVarintError,
    VarintOverflowError,
)
from .utils import (
    bits_clear,
    bits_is_set_all,
    bits_is_set_any,
    bits_set,
    bits_toggle,
    constrain,
    map_range,
    u8_to_hex,
    u16_to_hex,
    u32_to_hex,
)

__version__ = "1.0.0"

__all__ = [
    # Fixed-width codec
    "store_u16_le",
    "store_u32_le",
    "load_u16_le",
    "load_u32_le",
    "store_u16_be",
    "store_u32_be",
    "load_u16_be",
    "load_u32_be",
    # Varint codec
    "store_u32_varint",
    "load_u32_varint",
    "encode_varint",
    "decode_varint",
    "varint_size",
    # Exceptions
    "LwutilError",
    "InvalidArgumentError",
    "EncodeError",
    "DecodeError",
    "BufferTooSmallError",
    "TruncatedVarintError",
    "VarintOverflowError",
    # Hex ASCII
    "u8_to_hex",
    "u16_to_hex",
    "u32_to_hex",
    # Bit helpers
    "bits_is_set_all",
    "bits_is_set_any",
    "bits_set",
    "bits_clear",
    "bits_toggle",
    "constrain",
    "map_range",
    # Version
    "__version__",
]
