"""KIM encoder.

This module provides encode_scalar() and encode(), which convert Unicode
scalar values and text to KIM byte sequences.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..exceptions import EncodeError, OutOfRangeError
from .bitpack import GroupPacker
from .classes import LengthClass, classify_scalar


def encode_scalar(value: int) -> bytes:
    """Encode a single Unicode scalar value to its KIM byte run.

    The value is classified, widened to the class's fixed bit capacity and
    split into big-endian 7-bit groups. Every byte except the last has its
    continuation flag set.

    Args:
        value: Unicode scalar value to encode

    Returns:
        KIM byte run (1-3 bytes)

    Raises:
        OutOfRangeError: If the value does not fit any length class
        EncodeError: If the value fits a class but is not a scalar value

    Examples:
        ```python
        encode_scalar(ord("c"))   # b"\\x63"
        encode_scalar(ord("ß"))   # b"\\x81\\x5f"
        encode_scalar(0x13080)    # b"\\x84\\xe1\\x00"
        ```
    """
    packer = GroupPacker()
    _write_scalar(packer, value, classify_scalar(value))
    return packer.to_bytes()


def encode(text: str) -> bytes:
    """Encode text to a KIM byte sequence.

    Code points are encoded independently and in order, so encoding is
    context free: encode(a + b) == encode(a) + encode(b).

    Args:
        text: Text to encode

    Returns:
        Concatenated KIM byte runs, one per code point

    Raises:
        EncodeError: If text contains a lone surrogate. The error offset is
            the index of the offending character and no partial output is
            returned.

    Examples:
        ```python
        from kimcodec import encode

        encode("cat")   # b"cat"
        encode("☃")     # b"\\x80\\xcc\\x03"
        ```
    """
    packer = GroupPacker()

    for char, length_class in iter_length_classes(text):
        _write_scalar(packer, ord(char), length_class)

    return packer.to_bytes()


def iter_length_classes(text: str) -> Iterator[tuple[str, LengthClass]]:
    """Yield each character of text with its length class.

    Raises:
        EncodeError: If a character is not a Unicode scalar value. The error
            offset is the character index.
    """
    for offset, char in enumerate(text):
        try:
            length_class = classify_scalar(ord(char))
        except OutOfRangeError as e:
            raise OutOfRangeError(
                f"Character {offset}: {e}", value=e.value, offset=offset
            ) from e
        except EncodeError as e:
            raise EncodeError(f"Character {offset}: {e}", offset=offset) from e
        yield char, length_class


def _write_scalar(packer: GroupPacker, value: int, length_class: LengthClass) -> None:
    """Write value as a D-bit integer padded to the class's KIM byte count.

    Raises:
        OutOfRangeError: If value needs more than the class's data bits
    """
    if value >> length_class.data_bits:
        raise OutOfRangeError(
            f"Value {value:#x} exceeds the {length_class.data_bits} data bits of class "
            f"{length_class.number}",
            value=value,
        )
    packer.write_value(value, length_class.kim_bytes)
