"""7-bit group packing and unpacking.

A KIM byte carries one 7-bit group in bits 6-0 and a continuation flag in
bit 7. A value is written as a run of groups, most significant first, with
the flag set on every byte except the last one.
"""

from __future__ import annotations

from .classes import CONTINUATION_FLAG, GROUP_BITS, GROUP_MASK


class GroupPacker:
    """Packs values as runs of continuation-flagged 7-bit groups.

    Example:
        >>> packer = GroupPacker()
        >>> packer.write_value(0x63, num_groups=1)
        >>> packer.write_value(0xDF, num_groups=2)
        >>> packer.to_bytes()
        b'c\\x81_'
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_value(self, value: int, num_groups: int) -> None:
        """Write an unsigned integer as a run of exactly num_groups bytes.

        The value is left-padded with zero bits to num_groups * 7 bits.

        Args:
            value: Unsigned integer value to write
            num_groups: Number of KIM bytes in the run (at least 1)

        Raises:
            ValueError: If value is negative or doesn't fit in num_groups groups
        """
        if value < 0:
            raise ValueError(f"write_value requires non-negative value, got {value}")
        if num_groups < 1:
            raise ValueError(f"num_groups must be at least 1, got {num_groups}")

        num_bits = num_groups * GROUP_BITS
        if value >> num_bits:
            raise ValueError(f"Value {value} requires more than {num_groups} groups ({num_bits} bits)")

        for i in range(num_groups - 1, -1, -1):
            group = (value >> (i * GROUP_BITS)) & GROUP_MASK
            self._buffer.append(group | CONTINUATION_FLAG if i else group)

    def to_bytes(self) -> bytes:
        """Return the packed runs as immutable bytes."""
        return bytes(self._buffer)


class GroupUnpacker:
    """Reads runs of continuation-flagged 7-bit groups from a byte buffer.

    Example:
        >>> unpacker = GroupUnpacker(b"c\\x81_")
        >>> unpacker.read_value()
        99
        >>> unpacker.read_value()
        223
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0

    def read_value(self, max_value: int | None = None) -> int:
        """Read one run and return the integer it carries.

        Args:
            max_value: Optional ceiling. Once the accumulated value exceeds it
                the value stops growing and the rest of the run is skipped up
                to its terminal byte. Callers must treat such a value as invalid.

        Returns:
            Reconstructed unsigned integer

        Raises:
            IndexError: If the buffer ends before a terminal byte is read
        """
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of buffer")

        start = self._position
        value = 0
        while self._position < len(self._data):
            byte = self._data[self._position]
            self._position += 1
            if max_value is None or value <= max_value:
                value = (value << GROUP_BITS) | (byte & GROUP_MASK)
            if not byte & CONTINUATION_FLAG:
                return value

        raise IndexError(
            f"Unterminated run: {self._position - start} bytes read without a terminal byte"
        )

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current byte position."""
        return self._position
