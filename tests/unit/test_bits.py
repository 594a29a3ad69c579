"""Unit tests for bitmask and numeric helpers."""

from __future__ import annotations

import pytest

from lwutil.exceptions import InvalidArgumentError
from lwutil.utils.bits import (
    bits_clear,
    bits_is_set_all,
    bits_is_set_any,
    bits_set,
    bits_toggle,
    constrain,
    map_range,
)


class TestBitMasks:
    """Test bit set/clear/toggle/test helpers."""

    def test_bits_set(self) -> None:
        """Test setting bits."""
        assert bits_set(0x12340, 0x01) == 0x12341

    def test_bits_clear(self) -> None:
        """Test clearing bits."""
        assert bits_clear(0x12341, 0x01) == 0x12340
        assert bits_clear(0xFF, 0xF0) == 0x0F

    def test_bits_toggle(self) -> None:
        """Test toggling bits."""
        assert bits_toggle(0x1234, 0xFF) == 0x1234 ^ 0xFF
        assert bits_toggle(bits_toggle(0x1234, 0xFF), 0xFF) == 0x1234

    def test_is_set_all(self) -> None:
        """Test that all mask bits must be set."""
        assert bits_is_set_all(0b1110, 0b0110) is True
        assert bits_is_set_all(0b1010, 0b0110) is False
        assert bits_is_set_all(0x00, 0x00) is True

    def test_is_set_any(self) -> None:
        """Test that one mask bit is enough."""
        assert bits_is_set_any(0b1010, 0b0110) is True
        assert bits_is_set_any(0b1000, 0b0110) is False
        assert bits_is_set_any(0xFF, 0x00) is False

    def test_inputs_not_modified(self) -> None:
        """Test pass-by-value semantics."""
        val = 0x10
        bits_set(val, 0x01)
        bits_clear(val, 0x10)

        assert val == 0x10


class TestConstrain:
    """Test clamping."""

    @pytest.mark.parametrize(
        "low,value,high,expected",
        [
            (10, 20, 30, 20),
            (20, 10, 30, 20),
            (20, 25, 30, 25),
            (20, 35, 30, 30),
        ],
    )
    def test_constrain(self, low: int, value: int, high: int, expected: int) -> None:
        """Test values below, inside and above the range."""
        assert constrain(low, value, high) == expected


class TestMapRange:
    """Test linear range mapping."""

    def test_map_positive_scale(self) -> None:
        """Test mapping onto an increasing range."""
        assert map_range(10, 5, 15, 50, 100) == 75

    def test_map_negative_scale(self) -> None:
        """Test mapping onto a decreasing range."""
        assert map_range(10, 5, 15, 90, 50) == 70

    def test_map_endpoints(self) -> None:
        """Test that range ends map onto each other."""
        assert map_range(0, 0, 1023, 0, 255) == 0
        assert map_range(1023, 0, 1023, 0, 255) == 255

    def test_map_truncates_toward_zero(self) -> None:
        """Test integer truncation for negative intermediate results."""
        # (1 - 0) * (0 - 10) / 3 = -3.33 -> -3
        assert map_range(1, 0, 3, 10, 0) == 7

    def test_map_empty_input_range(self) -> None:
        """Test that an empty input range is rejected."""
        with pytest.raises(InvalidArgumentError, match="empty"):
            map_range(5, 5, 5, 0, 100)
