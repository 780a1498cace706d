"""Tokenizing decimal numbers into a 64-bit mantissa and a power of ten."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from asciinum.options import (
    CharsFormat,
    NumberSyntaxError,
    ParseErrorKind,
    ParseOptions,
)
from asciinum.swar import is_integer

_M64 = (1 << 64) - 1
_MIN_NINETEEN_DIGITS = 10**18
_MAX_DIGITS = 19
_EXPONENT_CAP = 0x10000000


@dataclass(frozen=True)
class ParsedNumber:
    """A matched decimal number: value is mantissa * 10**exponent.

    When ``too_many_digits`` is set the mantissa holds only the first 19
    significant digits and the exponent is adjusted to match them.
    """

    mantissa: int
    exponent: int
    negative: bool
    end: int
    integer: str
    fraction: str
    too_many_digits: bool = False


def _digit(c: str) -> int:
    return ord(c) - 0x30


def parse_number_string(
    text: str,
    options: Optional[ParseOptions] = None,
    json_format: Optional[bool] = None,
) -> ParsedNumber:
    """Match a decimal number at the start of ``text``.

    Raises NumberSyntaxError when no number in the requested syntax is found.
    ``json_format`` defaults to whether the options ask for basic JSON.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    if options is None:
        options = ParseOptions()
    fmt = options.effective_format()
    if json_format is None:
        json_format = bool(fmt & CharsFormat.BASIC_JSON)
    point = options.decimal_point
    n = len(text)

    def at(k: int) -> str:
        return text[k] if k < n else ""

    p = 0
    first = at(0)
    negative = first == "-"
    allow_plus = bool(fmt & CharsFormat.ALLOW_LEADING_PLUS) and not json_format
    if negative or (allow_plus and first == "+"):
        p += 1
        if p == n:
            raise NumberSyntaxError(ParseErrorKind.MISSING_INTEGER_OR_DOT_AFTER_SIGN, p)
        c = text[p]
        if json_format:
            if not is_integer(c):
                raise NumberSyntaxError(ParseErrorKind.MISSING_INTEGER_AFTER_SIGN, p)
        elif not is_integer(c) and c != point:
            raise NumberSyntaxError(ParseErrorKind.MISSING_INTEGER_OR_DOT_AFTER_SIGN, p)

    start_digits = p
    mantissa = 0
    while p < n and is_integer(text[p]):
        mantissa = (10 * mantissa + _digit(text[p])) & _M64
        p += 1
    end_integer = p
    digit_count = end_integer - start_digits

    if json_format:
        if digit_count == 0:
            raise NumberSyntaxError(ParseErrorKind.NO_DIGITS_IN_INTEGER_PART, p)
        if text[start_digits] == "0" and digit_count > 1:
            raise NumberSyntaxError(
                ParseErrorKind.LEADING_ZEROS_IN_INTEGER_PART, start_digits
            )

    exponent = 0
    frac_start = frac_end = p
    has_point = p < n and text[p] == point
    if has_point:
        p += 1
        frac_start = p
        while p < n and is_integer(text[p]):
            mantissa = (10 * mantissa + _digit(text[p])) & _M64
            p += 1
        frac_end = p
        exponent = frac_start - p
        digit_count -= exponent

    if json_format:
        if has_point and exponent == 0:
            raise NumberSyntaxError(ParseErrorKind.NO_DIGITS_IN_FRACTIONAL_PART, p)
    elif digit_count == 0:
        raise NumberSyntaxError(ParseErrorKind.NO_DIGITS_IN_MANTISSA, p)

    exp_number = 0
    c = at(p)
    scientific_marker = bool(fmt & CharsFormat.SCIENTIFIC) and c in ("e", "E")
    fortran_marker = bool(fmt & CharsFormat.BASIC_FORTRAN) and c in ("+", "-", "d", "D")
    if c and (scientific_marker or fortran_marker):
        location_of_e = p
        if c in ("e", "E", "d", "D"):
            p += 1
        neg_exp = False
        if at(p) == "-":
            neg_exp = True
            p += 1
        elif at(p) == "+":
            p += 1
        if p == n or not is_integer(text[p]):
            if not fmt & CharsFormat.FIXED:
                raise NumberSyntaxError(ParseErrorKind.MISSING_EXPONENTIAL_PART, p)
            p = location_of_e
        else:
            while p < n and is_integer(text[p]):
                if exp_number < _EXPONENT_CAP:
                    exp_number = 10 * exp_number + _digit(text[p])
                p += 1
            if neg_exp:
                exp_number = -exp_number
            exponent += exp_number
    elif fmt & CharsFormat.SCIENTIFIC and not fmt & CharsFormat.FIXED:
        raise NumberSyntaxError(ParseErrorKind.MISSING_EXPONENTIAL_PART, p)

    end = p
    too_many_digits = False
    if digit_count > _MAX_DIGITS:
        s = start_digits
        while s < n and text[s] in ("0", point):
            if text[s] == "0":
                digit_count -= 1
            s += 1
        if digit_count > _MAX_DIGITS:
            too_many_digits = True
            mantissa = 0
            q = start_digits
            while mantissa < _MIN_NINETEEN_DIGITS and q < end_integer:
                mantissa = mantissa * 10 + _digit(text[q])
                q += 1
            if mantissa >= _MIN_NINETEEN_DIGITS:
                exponent = end_integer - q + exp_number
            else:
                q = frac_start
                while mantissa < _MIN_NINETEEN_DIGITS and q < frac_end:
                    mantissa = mantissa * 10 + _digit(text[q])
                    q += 1
                exponent = frac_start - q + exp_number

    return ParsedNumber(
        mantissa=mantissa,
        exponent=exponent,
        negative=negative,
        end=end,
        integer=text[start_digits:end_integer],
        fraction=text[frac_start:frac_end],
        too_many_digits=too_many_digits,
    )