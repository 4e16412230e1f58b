"""Exercises on reporting failures: messages, parse errors and custom error types."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"([+-]?)([0-9]+)")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int, signed: bool) -> int:
    """Parse a fixed-width integer, raising ValueError with the reason on failure."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise ValueError("invalid digit found in string")
    sign, digits = match.groups()
    if sign == "-" and not signed:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if sign == "-":
        value = -value
    if signed:
        low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    else:
        low, high = 0, 2**bits - 1
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is rejected with an explanation."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    quantity = _parse_int(item_quantity, 32, signed=True)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def buy_items(tokens: int, user_input: str) -> int:
    """Try to buy the typed quantity, print the outcome and return the tokens left."""
    try:
        cost = total_cost(user_input)
    except ValueError as error:
        print(error)
        return tokens
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(enum.Enum):
    """Why a positive nonzero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value is not a positive nonzero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap the value; raise CreationError when it is negative or zero."""
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive nonzero integer.

    ``cause`` is either a CreationError or the ValueError from parsing the number.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer from text and require it to be positive and nonzero."""
    try:
        value = _parse_int(text, 64, signed=True)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error