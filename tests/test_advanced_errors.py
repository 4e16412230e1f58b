import pytest

from drillbook.lessons.advanced_errors import (
    Climate,
    ClimateErrorKind,
    ParseClimateError,
    parse_positive_nonzero,
)
from drillbook.lessons.errors import (
    CreationError,
    CreationErrorKind,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
)


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_positive_nonzero("not a number")
    assert not isinstance(info.value.cause, CreationError)
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_positive_nonzero("-555")
    assert isinstance(info.value.cause, CreationError)
    assert info.value.cause.kind is CreationErrorKind.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_positive_nonzero("0")
    assert info.value.cause.kind is CreationErrorKind.ZERO


def test_positive():
    expected = PositiveNonzeroInteger.new(42)
    assert parse_positive_nonzero("42") == expected


def test_empty():
    with pytest.raises(ParseClimateError) as info:
        Climate.parse("")
    assert info.value.kind is ClimateErrorKind.EMPTY
    assert str(info.value) == "empty input"


def test_short():
    with pytest.raises(ParseClimateError) as info:
        Climate.parse("Boston,1991")
    assert info.value.kind is ClimateErrorKind.BAD_LEN
    assert str(info.value) == "incorrect number of fields"


def test_long():
    with pytest.raises(ParseClimateError) as info:
        Climate.parse("Paris,1920,17.2,extra")
    assert info.value.kind is ClimateErrorKind.BAD_LEN
    assert str(info.value) == "incorrect number of fields"


def test_no_city():
    with pytest.raises(ParseClimateError) as info:
        Climate.parse(",1997,20.5")
    assert info.value.kind is ClimateErrorKind.NO_CITY
    assert str(info.value) == "no city name"


@pytest.mark.parametrize("text", ["Barcelona,-25,22.3", "Beijing,foo,15.0"])
def test_parse_int(text):
    with pytest.raises(ParseClimateError) as info:
        Climate.parse(text)
    error = info.value
    assert error.kind is ClimateErrorKind.PARSE_INT
    assert str(error) == f"error parsing year: {error.cause}"


def test_parse_float():
    with pytest.raises(ParseClimateError) as info:
        Climate.parse("Manila,2001,bar")
    error = info.value
    assert error.kind is ClimateErrorKind.PARSE_FLOAT
    assert str(error) == f"error parsing temperature: {error.cause}"


def test_parse_good():
    assert Climate.parse("Munich,2015,23.1") == Climate(city="Munich", year=2015, temp=23.1)


def test_downcast():
    with pytest.raises(ParseClimateError) as info:
        Climate.parse("São Paulo,-21,28.5")
    error = info.value
    assert error.kind is ClimateErrorKind.PARSE_INT
    assert isinstance(error.cause, ValueError)
    assert error.__cause__ is error.cause