import dataclasses

import pytest

from asciinum.options import (
    CharsFormat,
    InvalidArgumentError,
    NumberSyntaxError,
    OutOfRangeError,
    ParseErrorKind,
    ParseOptions,
)


def test_defaults():
    options = ParseOptions()
    assert options.format == CharsFormat.GENERAL
    assert options.decimal_point == "."
    assert options.base == 10


def test_general_is_fixed_and_scientific():
    fmt = ParseOptions(format=CharsFormat.GENERAL).effective_format()
    assert fmt & CharsFormat.FIXED == CharsFormat.FIXED
    assert fmt & CharsFormat.SCIENTIFIC == CharsFormat.SCIENTIFIC
    assert not fmt & CharsFormat.ALLOW_LEADING_PLUS


@pytest.mark.parametrize("fmt", [CharsFormat.JSON, CharsFormat.FORTRAN])
def test_composite_formats_include_general(fmt):
    assert fmt & CharsFormat.GENERAL == CharsFormat.GENERAL


def test_fortran_flag_only_in_fortran():
    fortran = ParseOptions(format=CharsFormat.FORTRAN).effective_format()
    json_fmt = ParseOptions(format=CharsFormat.JSON).effective_format()
    assert fortran & CharsFormat.BASIC_FORTRAN == CharsFormat.BASIC_FORTRAN
    assert not json_fmt & CharsFormat.BASIC_FORTRAN


def test_effective_format_matches_given():
    fmt = CharsFormat.SCIENTIFIC | CharsFormat.ALLOW_LEADING_PLUS
    assert ParseOptions(format=fmt).effective_format() == fmt


def test_int_format_is_coerced():
    options = ParseOptions(format=int(CharsFormat.FIXED))
    assert isinstance(options.format, CharsFormat)
    assert options.format == CharsFormat.FIXED


def test_comma_decimal_point():
    assert ParseOptions(decimal_point=",").decimal_point == ","


@pytest.mark.parametrize("point", ["", "..", 46])
def test_bad_decimal_point(point):
    with pytest.raises(ValueError):
        ParseOptions(decimal_point=point)


@pytest.mark.parametrize("base", [0, 1, 37, -10])
def test_bad_base(base):
    with pytest.raises(ValueError):
        ParseOptions(base=base)


def test_base_must_be_int():
    with pytest.raises(TypeError):
        ParseOptions(base=10.0)


def test_options_are_frozen():
    options = ParseOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.base = 16
    assert options.base == 10
    assert options.effective_format() == CharsFormat.GENERAL


def test_syntax_error_carries_kind_and_position():
    err = NumberSyntaxError(ParseErrorKind.NO_DIGITS_IN_MANTISSA, 3)
    assert err.kind is ParseErrorKind.NO_DIGITS_IN_MANTISSA
    assert err.position == 3
    assert ParseErrorKind.NO_DIGITS_IN_MANTISSA.value in str(err)
    assert isinstance(err, ValueError)


def test_invalid_argument_position():
    err = InvalidArgumentError(0)
    assert err.position == 0
    with pytest.raises(ValueError):
        raise err


def test_out_of_range_keeps_value():
    err = OutOfRangeError(5, float("inf"))
    assert err.position == 5
    assert err.value == float("inf")