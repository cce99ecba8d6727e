"""Exception hierarchy for kimcodec.

All exceptions inherit from KimError so callers can catch any codec failure
with a single except clause. Encoding and decoding failures are split into
EncodeError and DecodeError, each carrying the offset at which the failure
occurred when it is known.
"""

from __future__ import annotations


class KimError(Exception):
    """Base exception for all kimcodec errors."""

    pass


class EncodeError(KimError):
    """Raised when text cannot be encoded to KIM format.

    Examples:
        - Lone surrogate code point in a Python str
        - Integer that is not a Unicode scalar value

    Attributes:
        offset: Character index of the offending code point, if known
    """

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class OutOfRangeError(EncodeError):
    """Raised when a value does not fit any length class.

    This cannot happen for a code point taken from a Python str and signals
    a programming error in the caller rather than bad data.

    Attributes:
        value: The rejected integer
    """

    def __init__(self, message: str, *, value: int, offset: int | None = None) -> None:
        super().__init__(message, offset=offset)
        self.value = value


class DecodeError(KimError):
    """Raised when a KIM byte sequence cannot be decoded.

    Attributes:
        offset: Byte offset of the first byte of the failing run, if known
    """

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class TruncatedError(DecodeError):
    """Raised when the byte stream ends inside a continuation run.

    The caller may recover by supplying more bytes; see decode_prefix().
    """

    pass


class InvalidScalarValueError(DecodeError):
    """Raised when a decoded run is not a Unicode scalar value.

    Examples:
        - Value above 0x10FFFF
        - Value in the surrogate range 0xD800-0xDFFF

    Attributes:
        value: The reconstructed integer (it stops growing once above 0x10FFFF)
    """

    def __init__(self, message: str, *, value: int, offset: int | None = None) -> None:
        super().__init__(message, offset=offset)
        self.value = value
