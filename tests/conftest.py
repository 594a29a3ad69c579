"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def buffer() -> bytearray:
    """Zeroed 10-byte scratch buffer."""
    return bytearray(10)


@pytest.fixture
def sample_bytes() -> bytes:
    """Four distinct bytes for fixed-width load tests."""
    return b"\x12\x34\x56\x78"
