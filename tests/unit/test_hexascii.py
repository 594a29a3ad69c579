"""Unit tests for hex ASCII formatting."""

from __future__ import annotations

import pytest

from lwutil.exceptions import InvalidArgumentError
from lwutil.types import check_uint
from lwutil.utils.hexascii import u8_to_hex, u16_to_hex, u32_to_hex


class TestHexFormatting:
    """Test fixed-width hex output."""

    def test_u32(self) -> None:
        """Test 32-bit formatting."""
        assert u32_to_hex(0x12345678) == "12345678"
        assert u32_to_hex(0x5678) == "00005678"
        assert u32_to_hex(0xDEADBEEF) == "deadbeef"

    def test_u16(self) -> None:
        """Test 16-bit formatting."""
        assert u16_to_hex(0x1256) == "1256"
        assert u16_to_hex(0x156) == "0156"

    def test_u8(self) -> None:
        """Test 8-bit formatting."""
        assert u8_to_hex(0x16) == "16"
        assert u8_to_hex(0x6) == "06"
        assert u8_to_hex(0xAB) == "ab"

    def test_zero(self) -> None:
        """Test zero padding for zero."""
        assert u8_to_hex(0) == "00"
        assert u16_to_hex(0) == "0000"
        assert u32_to_hex(0) == "00000000"


class TestHexValidation:
    """Test range checking of hex inputs."""

    @pytest.mark.parametrize(
        "func,value",
        [
            (u8_to_hex, 0x100),
            (u8_to_hex, -1),
            (u16_to_hex, 0x10000),
            (u32_to_hex, 0x1_0000_0000),
        ],
    )
    def test_out_of_range(self, func, value: int) -> None:  # type: ignore[no-untyped-def]
        """Test values too wide for the requested width."""
        with pytest.raises(InvalidArgumentError):
            func(value)

    def test_rejects_strings(self) -> None:
        """Test that strings are not coerced."""
        with pytest.raises(InvalidArgumentError):
            u8_to_hex("12")  # type: ignore[arg-type]

    def test_unsupported_width(self) -> None:
        """Test check_uint with a width it does not know."""
        with pytest.raises(InvalidArgumentError, match="Unsupported width"):
            check_uint(1, 12)
