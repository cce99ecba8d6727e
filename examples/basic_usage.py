#!/usr/bin/env python3
"""Basic usage example for kimcodec.

This example demonstrates:
1. Encoding text to a KimString
2. Inspecting the KIM bytes
3. Comparing sizes with UTF-8
4. Decoding back to text, including a stream split mid-character
"""

from __future__ import annotations

from kimcodec import (
    KimString,
    TruncatedError,
    class_counts,
    decode,
    decode_prefix,
    utf8_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("kimcodec Basic Usage Example")
    print("=" * 60)
    print()

    text = "Grüße ☃ 𓂀"

    # Encode
    print("1. Encoding text...")
    kim = KimString.from_text(text)
    print(f"   Text: {text!r}")
    print(f"   Characters: {len(text)}")
    print()

    # Inspect bytes
    print("2. KIM bytes...")
    for char in text:
        run = bytes(KimString.from_text(char))
        bits = " ".join(f"{byte:08b}" for byte in run)
        print(f"   {char!r:>6}  U+{ord(char):05X}  {bits}")
    print()

    # Sizes
    print("3. Comparing sizes...")
    print(f"   Length classes: {class_counts(text)}")
    print(f"   UTF-8: {utf8_size(text)} bytes")
    print(f"   KIM:   {kim.byte_length()} bytes")
    print()

    # Decode
    print("4. Decoding...")
    print(f"   Decoded: {kim.into_text()!r}")

    wire = kim.as_bytes().tobytes()
    head, consumed = decode_prefix(wire[:-1])
    print(f"   Prefix of {len(wire) - 1} bytes: {head!r} ({consumed} bytes consumed)")

    try:
        decode(wire[:-1])
    except TruncatedError as e:
        print(f"   Full decode of the same prefix fails: {e}")
    print()

    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
