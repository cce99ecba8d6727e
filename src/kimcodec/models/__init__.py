"""Container models for kimcodec.

This module provides the KimString class, which owns an encoded KIM byte
sequence.
"""

from __future__ import annotations

from .kimstring import KimString

__all__ = [
    "KimString",
]
