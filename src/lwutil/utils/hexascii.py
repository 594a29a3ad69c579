"""Unsigned integer to hexadecimal ASCII formatting.

Output is fixed width (two characters per byte), zero padded, most significant
nibble first and lowercase.
"""

from __future__ import annotations

from ..types import check_uint

_HEX_DIGITS = "0123456789abcdef"


def _to_hex(value: int, bits: int) -> str:
    value = check_uint(value, bits)
    return "".join(
        _HEX_DIGITS[(value >> shift) & 0x0F] for shift in range(bits - 4, -1, -4)
    )


def u8_to_hex(value: int) -> str:
    """Format an unsigned 8-bit value as 2 hex characters.

    Raises:
        InvalidArgumentError: If value is not in 0..0xFF

    Example:
        >>> u8_to_hex(0x6)
        '06'
    """
    return _to_hex(value, 8)


def u16_to_hex(value: int) -> str:
    """Format an unsigned 16-bit value as 4 hex characters.

    Raises:
        InvalidArgumentError: If value is not in 0..0xFFFF
    """
    return _to_hex(value, 16)


def u32_to_hex(value: int) -> str:
    """Format an unsigned 32-bit value as 8 hex characters.

    Raises:
        InvalidArgumentError: If value is not in 0..0xFFFFFFFF

    Example:
        >>> u32_to_hex(0x5678)
        '00005678'
    """
    return _to_hex(value, 32)
