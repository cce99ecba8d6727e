"""KIM decoder.

This module provides decode(), which converts a KIM byte sequence back to
text, plus iter_scalars() and decode_prefix() for callers that need to work
with partial or streamed input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..exceptions import InvalidScalarValueError, TruncatedError
from .bitpack import GroupUnpacker
from .classes import MAX_SCALAR_VALUE, is_scalar_value

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


def iter_scalars(data: BytesLike) -> Iterator[tuple[int, int]]:
    """Yield (offset, value) for each run in a KIM byte sequence.

    Errors are raised lazily, when the failing run is reached.

    Args:
        data: KIM byte sequence

    Yields:
        Byte offset of the run and the scalar value it carries

    Raises:
        TruncatedError: If the sequence ends inside a run
        InvalidScalarValueError: If a run is not a Unicode scalar value
    """
    unpacker = GroupUnpacker(data)

    while unpacker.bytes_remaining():
        offset = unpacker.position()
        try:
            value = unpacker.read_value(max_value=MAX_SCALAR_VALUE)
        except IndexError as e:
            raise TruncatedError(
                f"Truncated data at byte {offset}: {e}", offset=offset
            ) from e

        if not is_scalar_value(value):
            raise InvalidScalarValueError(
                f"Run at byte {offset} decodes to {value:#x}, not a Unicode scalar value",
                value=value,
                offset=offset,
            )

        yield offset, value


def decode(data: BytesLike) -> str:
    """Decode a KIM byte sequence to text.

    The decoder performs no classification: a run ends at the first byte
    with a clear continuation flag. Decoding is all or nothing.

    Args:
        data: KIM byte sequence

    Returns:
        Decoded text

    Raises:
        TruncatedError: If the sequence ends with a continuation byte
        InvalidScalarValueError: If a run is above 0x10FFFF or a surrogate

    Examples:
        ```python
        from kimcodec import decode

        decode(b"\\x84\\xe1\\x00\\x81\\x5fa")  # "𓂀ßa"
        ```
    """
    try:
        return "".join(chr(value) for _, value in iter_scalars(data))
    except (TruncatedError, InvalidScalarValueError) as e:
        logger.debug("Rejected %d-byte KIM sequence at offset %s: %s", len(data), e.offset, e)
        raise


def decode_prefix(data: BytesLike) -> tuple[str, int]:
    """Decode every complete run and report how many bytes were used.

    An unterminated run at the end of the data is left for the caller, who
    can prepend it to the next chunk of input.

    Args:
        data: KIM byte sequence, possibly ending mid-run

    Returns:
        Tuple of (decoded text, number of bytes consumed)

    Raises:
        InvalidScalarValueError: If a complete run is not a scalar value

    Example:
        ```python
        text, consumed = decode_prefix(b"a\\x81")
        # text == "a", consumed == 1, b"\\x81" still pending
        ```
    """
    chars: list[str] = []

    try:
        for _, value in iter_scalars(data):
            chars.append(chr(value))
    except TruncatedError as e:
        pending = e.offset or 0
        logger.debug("Leaving %d pending bytes at offset %d", len(data) - pending, pending)
        return "".join(chars), pending

    return "".join(chars), len(data)
