"""Utility functions for kimcodec.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import class_counts, encoded_size, utf8_size

__all__ = [
    "class_counts",
    "encoded_size",
    "utf8_size",
]
