"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_text() -> str:
    """Sample text covering all four length classes."""
    return "Hello, ßnow ☃ and 𓂀!"


@pytest.fixture
def sample_kim() -> bytes:
    """KIM encoding of "𓂀ßa"."""
    return bytes([0b10000100, 0b11100001, 0b00000000, 0b10000001, 0b01011111, 0b01100001])
