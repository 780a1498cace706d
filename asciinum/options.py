"""Parsing options, number formats and the errors raised by the parsers."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CharsFormat(enum.IntFlag):
    """Flags selecting which textual forms of a number are accepted."""

    SCIENTIFIC = 1 << 0
    FIXED = 1 << 2
    HEX = 1 << 3
    NO_INFNAN = 1 << 4
    BASIC_JSON = 1 << 5
    BASIC_FORTRAN = 1 << 6
    ALLOW_LEADING_PLUS = 1 << 7
    SKIP_WHITE_SPACE = 1 << 8

    GENERAL = FIXED | SCIENTIFIC
    JSON = BASIC_JSON | FIXED | SCIENTIFIC | NO_INFNAN
    JSON_OR_INFNAN = BASIC_JSON | FIXED | SCIENTIFIC
    FORTRAN = BASIC_FORTRAN | FIXED | SCIENTIFIC


class ParseErrorKind(enum.Enum):
    """Why a decimal number could not be matched."""

    MISSING_INTEGER_AFTER_SIGN = "the minus sign must be followed by an integer"
    MISSING_INTEGER_OR_DOT_AFTER_SIGN = (
        "a sign must be followed by an integer or the decimal point"
    )
    LEADING_ZEROS_IN_INTEGER_PART = "the integer part must not have leading zeros"
    NO_DIGITS_IN_INTEGER_PART = "the integer part must have at least one digit"
    NO_DIGITS_IN_FRACTIONAL_PART = (
        "a decimal point must be followed by fractional digits"
    )
    NO_DIGITS_IN_MANTISSA = "the mantissa must have at least one digit"
    MISSING_EXPONENTIAL_PART = "scientific notation requires an exponential part"


@dataclass(frozen=True)
class ParseOptions:
    """Settings shared by the decimal and integer parsers."""

    format: CharsFormat = CharsFormat.GENERAL
    decimal_point: str = "."
    base: int = 10

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", CharsFormat(self.format))
        if not isinstance(self.decimal_point, str) or len(self.decimal_point) != 1:
            raise ValueError("decimal_point must be a single character")
        if isinstance(self.base, bool) or not isinstance(self.base, int):
            raise TypeError("base must be an integer")
        if not 2 <= self.base <= 36:
            raise ValueError("base must be between 2 and 36")

    def effective_format(self) -> CharsFormat:
        """The format flags the parsers actually apply."""
        return CharsFormat(self.format)


class NumberSyntaxError(ValueError):
    """The text does not start with a number in the requested syntax."""

    def __init__(self, kind: ParseErrorKind, position: int) -> None:
        super().__init__(f"{kind.value} (at position {position})")
        self.kind = kind
        self.position = position


class InvalidArgumentError(ValueError):
    """No number could be read at the start of the text."""

    def __init__(self, position: int = 0, message: str = "no number found") -> None:
        super().__init__(f"{message} (at position {position})")
        self.position = position


class OutOfRangeError(ValueError):
    """A number was read but it does not fit the requested type."""

    def __init__(self, position: int, value: object = None) -> None:
        super().__init__(f"number out of range (ends at position {position})")
        self.position = position
        self.value = value