"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from kimcodec import (
    InvalidScalarValueError,
    KimString,
    TruncatedError,
    classify,
    decode,
    decode_prefix,
    encode,
)
from kimcodec.codec.classes import CONTINUATION_FLAG

# Python str may hold lone surrogates; well-formed text excludes them
texts = st.text(alphabet=st.characters(exclude_categories=("Cs",)))
scalar_values = st.integers(min_value=0, max_value=0x10FFFF).filter(
    lambda v: not 0xD800 <= v <= 0xDFFF
)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(text=texts)
    def test_roundtrip(self, text: str) -> None:
        """Test into_text(from_text(s)) == s."""
        assert KimString.from_text(text).into_text() == text

    @given(a=texts, b=texts)
    def test_concatenation(self, a: str, b: str) -> None:
        """Test encoding is context free."""
        assert encode(a) + encode(b) == encode(a + b)

    @given(value=scalar_values)
    def test_byte_length_bound(self, value: int) -> None:
        """Test KIM never uses more bytes than UTF-8, and fewer only for class 4."""
        char = chr(value)
        kim_length = len(encode(char))
        utf8_length = len(char.encode("utf-8"))

        assert kim_length <= utf8_length
        assert (kim_length < utf8_length) == (classify(value).number == 4)

    @given(value=scalar_values)
    def test_run_structure(self, value: int) -> None:
        """Test only the last byte of a run clears the continuation flag."""
        run = encode(chr(value))

        assert all(byte & CONTINUATION_FLAG for byte in run[:-1])
        assert not run[-1] & CONTINUATION_FLAG

    @given(text=texts)
    def test_truncation_detected(self, text: str) -> None:
        """Test cutting the last run short raises TruncatedError."""
        data = encode(text + "ß")
        try:
            decode(data[:-1])
        except TruncatedError as e:
            assert e.offset == len(data) - 2
        else:
            raise AssertionError("expected TruncatedError")

    @given(text=texts, cut=st.integers(min_value=0, max_value=64))
    def test_decode_prefix_resumes(self, text: str, cut: int) -> None:
        """Test a split stream decodes to the same text."""
        data = encode(text)
        cut = min(cut, len(data))

        head, consumed = decode_prefix(data[:cut])
        assert head + decode(data[consumed:]) == text

    @given(data=st.binary(), tail=st.integers(min_value=0x80, max_value=0xFF))
    def test_trailing_continuation_is_truncated(self, data: bytes, tail: int) -> None:
        """Test any input ending on a continuation byte is truncated, never invalid."""
        try:
            decode(data + bytes([tail]))
        except TruncatedError:
            pass
        except InvalidScalarValueError as e:
            # A complete run before the tail may itself be invalid
            assert e.offset is not None and e.offset < len(data)
        else:
            raise AssertionError("expected TruncatedError")
