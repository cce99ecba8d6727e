"""Text size calculation utilities.

This module provides functions to calculate the KIM and UTF-8 sizes of text
without actually encoding it.
"""

from __future__ import annotations

from ..codec.classes import LENGTH_CLASSES
from ..codec.encoder import iter_length_classes


def class_counts(text: str) -> dict[int, int]:
    """Count the code points of each length class in text.

    Args:
        text: Text to analyze

    Returns:
        Dictionary mapping class number (1-4) to code point count. All four
        classes are present, with zero counts where unused.

    Raises:
        EncodeError: If text contains a lone surrogate

    Example:
        >>> class_counts("cat☃")
        {1: 3, 2: 0, 3: 1, 4: 0}
    """
    counts = {length_class.number: 0 for length_class in LENGTH_CLASSES}

    for _char, length_class in iter_length_classes(text):
        counts[length_class.number] += 1

    return counts


def encoded_size(text: str) -> int:
    """Calculate the KIM size of text in bytes.

    Args:
        text: Text to measure

    Returns:
        Number of bytes encode(text) would produce

    Raises:
        EncodeError: If text contains a lone surrogate

    Example:
        >>> encoded_size("𓂀ßa")
        6
    """
    counts = class_counts(text)
    return sum(counts[c.number] * c.kim_bytes for c in LENGTH_CLASSES)


def utf8_size(text: str) -> int:
    """Calculate the UTF-8 size of text in bytes, for comparison.

    Example:
        >>> utf8_size("𓂀ßa")
        7
    """
    counts = class_counts(text)
    return sum(counts[c.number] * c.utf8_bytes for c in LENGTH_CLASSES)
