"""Unit tests for 7-bit group packing utilities."""

from __future__ import annotations

import pytest

from kimcodec.codec.bitpack import GroupPacker, GroupUnpacker


class TestGroupPacker:
    """Test GroupPacker functionality."""

    def test_write_single_group(self) -> None:
        """Test a one-byte run has no continuation flag."""
        packer = GroupPacker()
        packer.write_value(0x63, 1)
        assert packer.to_bytes() == b"\x63"

    def test_write_multiple_groups(self) -> None:
        """Test continuation flags on all but the last byte."""
        packer = GroupPacker()
        packer.write_value(0x2603, 3)  # ☃

        assert packer.to_bytes() == b"\x80\xcc\x03"

    def test_left_padding(self) -> None:
        """Test small values are padded to the requested group count."""
        packer = GroupPacker()
        packer.write_value(0, 3)

        assert packer.to_bytes() == b"\x80\x80\x00"

    def test_write_value_bounds(self) -> None:
        """Test value bounds checking."""
        packer = GroupPacker()

        # Valid values
        packer.write_value(0x7F, 1)
        packer.write_value(0x3FFF, 2)

        with pytest.raises(ValueError, match="negative"):
            packer.write_value(-1, 1)

        with pytest.raises(ValueError, match="more than"):
            packer.write_value(0x80, 1)

        with pytest.raises(ValueError, match="at least 1"):
            packer.write_value(0, 0)

    def test_empty_packer(self) -> None:
        """Test empty group packer."""
        packer = GroupPacker()
        assert packer.to_bytes() == b""


class TestGroupUnpacker:
    """Test GroupUnpacker functionality."""

    def test_read_values(self) -> None:
        """Test reading consecutive runs."""
        unpacker = GroupUnpacker(b"c\x81\x5f")

        assert unpacker.read_value() == 0x63
        assert unpacker.position() == 1
        assert unpacker.read_value() == 0xDF
        assert unpacker.bytes_remaining() == 0

    def test_read_past_end(self) -> None:
        """Test error on reading past end."""
        unpacker = GroupUnpacker(b"c")
        unpacker.read_value()

        with pytest.raises(IndexError, match="past end"):
            unpacker.read_value()

    def test_unterminated_run(self) -> None:
        """Test error when the last byte has its continuation flag set."""
        unpacker = GroupUnpacker(b"\x80\xcc")

        with pytest.raises(IndexError, match="Unterminated"):
            unpacker.read_value()

    def test_max_value_caps_growth(self) -> None:
        """Test the value stops growing past max_value but the run is read to its end."""
        unpacker = GroupUnpacker(b"\xff" * 100 + b"\x00a")

        value = unpacker.read_value(max_value=0x10FFFF)
        assert 0x10FFFF < value < 1 << 28
        assert unpacker.position() == 101
        assert unpacker.read_value() == 0x61

    def test_max_value_unterminated(self) -> None:
        """Test an oversized run that never ends is still unterminated."""
        unpacker = GroupUnpacker(b"\xff" * 4)

        with pytest.raises(IndexError, match="Unterminated"):
            unpacker.read_value(max_value=0x10FFFF)

    def test_accepts_memoryview(self) -> None:
        """Test reading from a memoryview."""
        unpacker = GroupUnpacker(memoryview(b"\x84\xe1\x00"))
        assert unpacker.read_value() == 0x13080


class TestRoundTrip:
    """Test round-trip packing/unpacking."""

    def test_roundtrip_mixed(self) -> None:
        """Test runs of different lengths round-trip."""
        packer = GroupPacker()
        packer.write_value(42, 1)
        packer.write_value(0x7FF, 2)
        packer.write_value(0x1FFFFF, 3)

        unpacker = GroupUnpacker(packer.to_bytes())
        assert unpacker.read_value() == 42
        assert unpacker.read_value() == 0x7FF
        assert unpacker.read_value() == 0x1FFFFF
