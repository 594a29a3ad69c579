"""Byte-level integer codecs for lwutil.

This module provides the unchecked fixed-width store/load primitives and the
checked variable-length integer (varint) codec.
"""

from __future__ import annotations

from .raw import (
    load_u16_be,
    load_u16_le,
    load_u32_be,
    load_u32_le,
    store_u16_be,
    store_u16_le,
    store_u32_be,
    store_u32_le,
)
from .varint import (
    decode_varint,
    encode_varint,
    load_u32_varint,
    store_u32_varint,
    varint_size,
)

__all__ = [
    # Fixed-width (unchecked)
    "store_u16_le",
    "store_u32_le",
    "load_u16_le",
    "load_u32_le",
    "store_u16_be",
    "store_u32_be",
    "load_u16_be",
    "load_u32_be",
    # Varint (checked)
    "store_u32_varint",
    "load_u32_varint",
    "encode_varint",
    "decode_varint",
    "varint_size",
]
