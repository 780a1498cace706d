"""Parsing fixed-width integers in bases 2 to 36."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from asciinum.options import (
    CharsFormat,
    InvalidArgumentError,
    OutOfRangeError,
    ParseOptions,
)

_U64_MAX = (1 << 64) - 1
_NOT_A_DIGIT = 255


class IntegerType(enum.Enum):
    """Fixed-width integer types a string can be parsed into."""

    INT8 = (8, True)
    UINT8 = (8, False)
    INT16 = (16, True)
    UINT16 = (16, False)
    INT32 = (32, True)
    UINT32 = (32, False)
    INT64 = (64, True)
    UINT64 = (64, False)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1 if self.signed else self.bits)) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0


@dataclass(frozen=True)
class IntegerResult:
    """A parsed integer and the index just past the characters consumed."""

    value: int
    end: int


def char_to_digit(c: Union[str, int]) -> int:
    """Digit value of an ASCII alphanumeric character, 255 for anything else."""
    code = ord(c) if isinstance(c, str) else int(c)
    if 0x30 <= code <= 0x39:
        return code - 0x30
    if 0x41 <= code <= 0x5A:
        return code - 0x41 + 10
    if 0x61 <= code <= 0x7A:
        return code - 0x61 + 10
    return _NOT_A_DIGIT


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError("base must be between 2 and 36")


@lru_cache(maxsize=None)
def max_digits_u64(base: int) -> int:
    """Number of digits of the largest 64-bit unsigned value in ``base``."""
    _check_base(base)
    count = 0
    n = _U64_MAX
    while n:
        n //= base
        count += 1
    return count


def min_safe_u64(base: int) -> int:
    """Smallest value with ``max_digits_u64(base)`` digits in ``base``.

    A value of that many digits that comes out smaller has wrapped around.
    """
    return base ** (max_digits_u64(base) - 1)


def parse_int_string(
    text: str,
    int_type: IntegerType = IntegerType.INT64,
    options: Optional[ParseOptions] = None,
) -> IntegerResult:
    """Parse an integer of ``int_type`` at the start of ``text``.

    Raises InvalidArgumentError when no digits are found and OutOfRangeError
    when the digits do not fit the type.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    if options is None:
        options = ParseOptions()
    fmt = options.effective_format()
    base = options.base
    n = len(text)

    first = text[0] if text else ""
    negative = first == "-"
    if negative and not int_type.signed:
        raise InvalidArgumentError(0, "an unsigned value cannot be negative")
    p = 0
    if negative or (fmt & CharsFormat.ALLOW_LEADING_PLUS and first == "+"):
        p = 1

    start_num = p
    while p < n and text[p] == "0":
        p += 1
    has_leading_zeros = p > start_num
    start_digits = p

    value = 0
    while p < n:
        digit = char_to_digit(text[p])
        if digit >= base:
            break
        value = (base * value + digit) & _U64_MAX
        p += 1

    digit_count = p - start_digits
    if digit_count == 0:
        if has_leading_zeros:
            return IntegerResult(0, p)
        raise InvalidArgumentError(0)

    max_digits = max_digits_u64(base)
    if digit_count > max_digits:
        raise OutOfRangeError(p)
    if digit_count == max_digits and value < min_safe_u64(base):
        raise OutOfRangeError(p)
    if value > int_type.max_value + int(negative):
        raise OutOfRangeError(p)

    return IntegerResult(-value if negative else value, p)