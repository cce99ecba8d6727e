"""Length classes shared by the KIM encoder and sizing helpers.

KIM reuses the four UTF-8 length classes. Each class has a fixed number of
data bits and a fixed number of KIM bytes (7 payload bits per byte). The
byte count never shrinks for values with leading zero bits.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import EncodeError, OutOfRangeError

MAX_SCALAR_VALUE = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

GROUP_BITS = 7
GROUP_MASK = 0x7F
CONTINUATION_FLAG = 0x80


@dataclass(frozen=True)
class LengthClass:
    """Encoding parameters for one length class.

    Attributes:
        number: Class number (1-4), equal to the UTF-8 byte count
        data_bits: Fixed bit capacity of the class
        kim_bytes: Number of KIM bytes emitted for the class
        limit: Exclusive upper bound of values in the class
    """

    number: int
    data_bits: int
    kim_bytes: int
    limit: int

    @property
    def utf8_bytes(self) -> int:
        return self.number

    @property
    def padding_bits(self) -> int:
        """Zero bits prepended to fill the first group."""
        return self.kim_bytes * GROUP_BITS - self.data_bits


LENGTH_CLASSES: tuple[LengthClass, ...] = (
    LengthClass(number=1, data_bits=7, kim_bytes=1, limit=0x80),
    LengthClass(number=2, data_bits=11, kim_bytes=2, limit=0x800),
    LengthClass(number=3, data_bits=16, kim_bytes=3, limit=0x10000),
    LengthClass(number=4, data_bits=21, kim_bytes=3, limit=1 << 21),
)


def classify(value: int) -> LengthClass:
    """Return the length class for an integer value.

    Args:
        value: Code point value to classify

    Returns:
        The LengthClass whose range holds the value

    Raises:
        OutOfRangeError: If the value is negative or exceeds 21 bits
    """
    if value >= 0:
        for length_class in LENGTH_CLASSES:
            if value < length_class.limit:
                return length_class

    raise OutOfRangeError(
        f"Value {value:#x} does not fit any length class (max {LENGTH_CLASSES[-1].limit - 1:#x})",
        value=value,
    )


def is_scalar_value(value: int) -> bool:
    """Check whether an integer is a Unicode scalar value."""
    return 0 <= value <= MAX_SCALAR_VALUE and not SURROGATE_MIN <= value <= SURROGATE_MAX


def classify_scalar(value: int) -> LengthClass:
    """Return the length class for a Unicode scalar value.

    Raises:
        OutOfRangeError: If the value does not fit any length class
        EncodeError: If the value fits a class but is not a scalar value
    """
    length_class = classify(value)
    if not is_scalar_value(value):
        raise EncodeError(f"Value {value:#x} is not a Unicode scalar value")
    return length_class
