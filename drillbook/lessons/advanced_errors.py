"""Exercises on error types that wrap lower-level errors and describe themselves."""

from __future__ import annotations

import contextlib
import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    _parse_int,
)

_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


@contextlib.contextmanager
def _into_parse_error() -> Iterator[None]:
    """Turn parse and creation failures raised inside the block into ParsePosNonzeroError."""
    try:
        yield
    except (CreationError, ValueError) as error:
        raise ParsePosNonzeroError(error) from error


def parse_positive_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive nonzero integer; raise ParsePosNonzeroError otherwise."""
    with _into_parse_error():
        value = _parse_int(text, 64, signed=True)
        return PositiveNonzeroInteger.new(value)


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


class ClimateErrorKind(enum.Enum):
    """Why a climate record could not be parsed."""

    EMPTY = enum.auto()
    BAD_LEN = enum.auto()
    NO_CITY = enum.auto()
    PARSE_INT = enum.auto()
    PARSE_FLOAT = enum.auto()


class ParseClimateError(ValueError):
    """A "city,year,temperature" record could not be parsed."""

    def __init__(self, kind: ClimateErrorKind, cause: ValueError | None = None) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        match self.kind:
            case ClimateErrorKind.EMPTY:
                return "empty input"
            case ClimateErrorKind.BAD_LEN:
                return "incorrect number of fields"
            case ClimateErrorKind.NO_CITY:
                return "no city name"
            case ClimateErrorKind.PARSE_FLOAT:
                return f"error parsing temperature: {self.cause}"
            case ClimateErrorKind.PARSE_INT:
                return f"error parsing year: {self.cause}"
        raise AssertionError(f"unknown kind {self.kind!r}")


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float

    @classmethod
    def parse(cls, text: str) -> Climate:
        """Parse "city,year,temperature"; raise ParseClimateError on any problem."""
        fields = text.split(",")
        if fields == [""]:
            raise ParseClimateError(ClimateErrorKind.EMPTY)
        if len(fields) != 3:
            raise ParseClimateError(ClimateErrorKind.BAD_LEN)
        city, year_text, temp_text = fields
        if not city:
            raise ParseClimateError(ClimateErrorKind.NO_CITY)
        try:
            year = _parse_int(year_text, 32, signed=False)
        except ValueError as error:
            raise ParseClimateError(ClimateErrorKind.PARSE_INT, error) from error
        try:
            temp = _parse_float(temp_text)
        except ValueError as error:
            raise ParseClimateError(ClimateErrorKind.PARSE_FLOAT, error) from error
        return cls(city=city, year=year, temp=temp)