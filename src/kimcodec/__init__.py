"""kimcodec: KIM text encoding

A Python library for the KIM text format, a reversible alternative to UTF-8
that packs each Unicode scalar value into continuation-flagged 7-bit groups.
KIM keeps the four UTF-8 length classes, uses the same number of bytes for
classes 1-3 and one byte fewer for class 4.

Key Features:
- Context-free, per-character encoding
- Typed errors for truncated and invalid input, with byte offsets
- Immutable Pydantic-based KimString container
- Pure Python implementation

Quick Start:
    >>> from kimcodec import KimString
    >>>
    >>> kim = KimString.from_text("𓂀ßa")
    >>> kim.byte_length()
    6
    >>> kim.as_bytes().hex()
    '84e100815f61'
    >>> kim.into_text()
    '𓂀ßa'
"""

from __future__ import annotations

import logging

from .codec import (
    LENGTH_CLASSES,
    LengthClass,
    classify,
    decode,
    decode_prefix,
    encode,
    encode_scalar,
    iter_scalars,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidScalarValueError,
    KimError,
    OutOfRangeError,
    TruncatedError,
)
from .models import KimString
from .utils import class_counts, encoded_size, utf8_size

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "KimString",
    "encode",
    "encode_scalar",
    "decode",
    "decode_prefix",
    "iter_scalars",
    # Length classes
    "LengthClass",
    "LENGTH_CLASSES",
    "classify",
    # Exceptions
    "KimError",
    "EncodeError",
    "OutOfRangeError",
    "DecodeError",
    "TruncatedError",
    "InvalidScalarValueError",
    # Sizing
    "encoded_size",
    "utf8_size",
    "class_counts",
    # Version
    "__version__",
]
