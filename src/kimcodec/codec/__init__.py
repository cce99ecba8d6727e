"""KIM codec.

This module provides encoding and decoding between Unicode text and KIM
byte sequences built from continuation-flagged 7-bit groups.
"""

from __future__ import annotations

from .classes import LENGTH_CLASSES, LengthClass, classify, is_scalar_value
from .decoder import decode, decode_prefix, iter_scalars
from .encoder import encode, encode_scalar

__all__ = [
    "encode",
    "encode_scalar",
    "decode",
    "decode_prefix",
    "iter_scalars",
    "LengthClass",
    "LENGTH_CLASSES",
    "classify",
    "is_scalar_value",
]
