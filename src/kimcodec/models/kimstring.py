"""KimString container.

This module provides the KimString class, an immutable Pydantic model that
owns one KIM byte sequence.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..codec.decoder import BytesLike, decode, iter_scalars
from ..codec.encoder import encode


class KimString(BaseModel):
    """Text held in KIM format.

    A KimString is created from text (or from a received byte sequence),
    never mutated, and decoded back to text on demand. Its only state is the
    byte sequence; every instance decodes without error.

    Example:
        >>> kim = KimString.from_text("ß")
        >>> kim.byte_length()
        2
        >>> kim.as_bytes().tobytes()
        b'\\x81_'
        >>> kim.into_text()
        'ß'

    Attributes:
        data: The owned KIM byte sequence
    """

    model_config = ConfigDict(
        # Reject str and other coercible inputs for the byte sequence
        strict=True,
        frozen=True,
        extra="forbid",
    )

    data: bytes = Field(default=b"")

    @field_validator("data")
    @classmethod
    def check_structure(cls, value: bytes) -> bytes:
        # DecodeError is not a ValueError, so it propagates unwrapped
        for _ in iter_scalars(value):
            pass
        return value

    @classmethod
    def from_text(cls, text: str) -> KimString:
        """Encode text into a new KimString.

        Args:
            text: Text to encode

        Returns:
            KimString owning the encoded byte sequence

        Raises:
            EncodeError: If text contains a lone surrogate
        """
        # Encoder output is well-formed by construction
        return cls.model_construct(data=encode(text))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> KimString:
        """Wrap a KIM byte sequence received from elsewhere.

        Args:
            data: KIM byte sequence

        Returns:
            KimString owning a copy of the data

        Raises:
            TruncatedError: If data ends inside a run
            InvalidScalarValueError: If a run is not a Unicode scalar value
        """
        return cls(data=bytes(data))

    def byte_length(self) -> int:
        """Return the number of KIM bytes (not characters or UTF-8 bytes)."""
        return len(self.data)

    def as_bytes(self) -> memoryview:
        """Return a read-only view of the byte sequence without copying."""
        return memoryview(self.data)

    def into_text(self) -> str:
        """Decode the byte sequence back to text."""
        return decode(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data
