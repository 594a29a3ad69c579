"""Bitmask and small numeric helpers.

All functions take their inputs by value and return a new value; nothing is
modified in place.
"""

from __future__ import annotations

from ..exceptions import InvalidArgumentError


def bits_is_set_all(val: int, bit_mask: int) -> bool:
    """Return True if every bit of bit_mask is set in val."""
    return (val & bit_mask) == bit_mask


def bits_is_set_any(val: int, bit_mask: int) -> bool:
    """Return True if at least one bit of bit_mask is set in val."""
    return (val & bit_mask) != 0


def bits_set(val: int, bit_mask: int) -> int:
    """Return val with the bits of bit_mask set."""
    return val | bit_mask


def bits_clear(val: int, bit_mask: int) -> int:
    """Return val with the bits of bit_mask cleared."""
    return val & ~bit_mask


def bits_toggle(val: int, bit_mask: int) -> int:
    """Return val with the bits of bit_mask inverted."""
    return val ^ bit_mask


def constrain(low: int, value: int, high: int) -> int:
    """Clamp value into the inclusive range [low, high].

    Example:
        >>> constrain(20, 35, 30)
        30
    """
    return max(low, min(value, high))


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly re-scale x from [in_min, in_max] to [out_min, out_max].

    Uses integer arithmetic with truncation toward zero, so results match a
    C implementation of the same formula. The output range may be inverted
    (out_min > out_max).

    Args:
        x: Input value
        in_min: Lower bound of the input range
        in_max: Upper bound of the input range
        out_min: Value that in_min maps to
        out_max: Value that in_max maps to

    Returns:
        Mapped value

    Raises:
        InvalidArgumentError: If the input range is empty (in_min == in_max)

    Example:
        >>> map_range(10, 5, 15, 90, 50)
        70
    """
    span = in_max - in_min
    if span == 0:
        raise InvalidArgumentError(f"Input range is empty: in_min == in_max == {in_min}")

    numerator = (x - in_min) * (out_max - out_min)
    quotient = abs(numerator) // abs(span)
    if (numerator < 0) != (span < 0):
        quotient = -quotient
    return quotient + out_min
