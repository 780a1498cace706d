# asciinum

Exact tokenizing of ASCII number strings.

`asciinum` splits a decimal number string into sign, 64-bit mantissa and
decimal exponent, and parses integers in any base from 2 to 36 into
fixed-width integer types. Both parsers read the longest valid prefix of the
text, report where they stopped, and never skip leading whitespace.

## Installing

```
pip install asciinum
```

## Decimal numbers

```python
from asciinum.decimal import parse_number_string
from asciinum.options import ParseOptions, CharsFormat

result = parse_number_string("234532.3426362,7869234.9823")
result.mantissa   # 2345323426362
result.exponent   # -7
result.negative   # False
result.end        # 14: parsing stopped at the comma
result.integer    # "234532"
result.fraction   # "3426362"

parse_number_string("1,25", ParseOptions(decimal_point=","))
parse_number_string("3.14e10", ParseOptions(format=CharsFormat.SCIENTIFIC))
```

The result is a frozen `ParsedNumber`; its value is
`mantissa * 10 ** exponent`, negated when `negative` is set.

With more than 19 significant digits, the mantissa is truncated to its first
19 digits, the exponent is corrected to match, and `too_many_digits` is set.
Leading zeros do not count as significant digits.

The format flags in `CharsFormat` decide which forms are accepted:

- `GENERAL` (the default) accepts both fixed and scientific notation.
- `SCIENTIFIC` alone requires an exponent; `"3.14"` is then an error.
- `FIXED` alone ignores an exponent: `"3.14e10"` stops after `"3.14"`.
- `ALLOW_LEADING_PLUS` accepts a leading `+` sign.
- `BASIC_FORTRAN` (included in `FORTRAN`) accepts exponents written as
  `1.0d5`, `1.0D5`, `1.0+5` or `1.0-5`.
- `BASIC_JSON` (included in `JSON` and `JSON_OR_INFNAN`) applies the JSON
  number rules: no leading `+`, no leading zeros in the integer part, and
  digits required on both sides of a decimal point. Passing
  `json_format=True` or `json_format=False` to `parse_number_string`
  overrides what the flags say.

Syntax errors raise `NumberSyntaxError` (a `ValueError`). Its `kind` is a
`ParseErrorKind` and its `position` is the index where the scan stopped.

## Integers

```python
from asciinum.integer import parse_int_string, IntegerType
from asciinum.options import ParseOptions

parse_int_string("255", IntegerType.UINT8).value              # 255
parse_int_string("-128", IntegerType.INT8).value              # -128
parse_int_string("ff", IntegerType.UINT16, ParseOptions(base=16)).value  # 255
```

`IntegerType` covers signed and unsigned 8, 16, 32 and 64-bit integers; the
default is `INT64`. The result is an `IntegerResult` holding the value and
`end`, the index just past the last digit used. Letters `a`–`z` and `A`–`Z`
stand for digits 10 to 35.

Text that does not start with a number, or a `-` sign for an unsigned type,
raises `InvalidArgumentError`. A value that does not fit the type raises
`OutOfRangeError`, whose `position` is where the scan of digits stopped.

`char_to_digit`, `max_digits_u64` and `min_safe_u64` are available from
`asciinum.integer` as well.

## Options

`ParseOptions` is a frozen dataclass with `format` (default
`CharsFormat.GENERAL`), `decimal_point` (a single character, default `"."`)
and `base` (2 to 36, default 10; used by the integer parser). Invalid values
raise `ValueError` or `TypeError` on construction.

## Low-level helpers

`asciinum.swar` provides the packed-digit helpers `is_integer`,
`byteswap64`, `byteswap32`, `read8_to_u64`, `read4_to_u32`,
`parse_eight_digits_unrolled`, `parse_four_digits_unrolled`,
`is_made_of_eight_digits_fast` and `is_made_of_four_digits_fast`. They work on
64- and 32-bit integers with wraparound arithmetic.

## What this package does not do

- It does not turn a `ParsedNumber` into a `float`; it only produces the
  mantissa and exponent.
- It does not recognise `inf`, `infinity` or `nan`, and it does not parse
  hexadecimal floating-point numbers. The `HEX`, `NO_INFNAN` and
  `SKIP_WHITE_SPACE` flags exist in `CharsFormat` but neither parser acts on
  them.
- There is no command-line program.

## Running the tests

```
pip install asciinum[test]
pytest
```