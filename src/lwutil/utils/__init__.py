"""Utility functions for lwutil.

This module provides hex ASCII formatting and bitmask helpers.
"""

from __future__ import annotations

from .bits import (
    bits_clear,
    bits_is_set_all,
    bits_is_set_any,
    bits_set,
    bits_toggle,
    constrain,
    map_range,
)
from .hexascii import u8_to_hex, u16_to_hex, u32_to_hex

__all__ = [
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
]
