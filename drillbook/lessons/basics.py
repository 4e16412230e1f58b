"""Small exercises on values, functions, branching, strings, modules and macros."""

from __future__ import annotations

import time
from typing import Sequence, TypeVar

T = TypeVar("T")

_BULK_THRESHOLD = 40
_SECRET_RECIPE = "Ginger"
_COLOR_WORDS = frozenset({"green", "blue", "red"})


def calculate_apple_price(amount: int) -> int:
    """Price of an order: 2 per apple, or 1 per apple when more than 40 are bought."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if amount > _BULK_THRESHOLD:
        return amount
    return amount * 2


def echo(arg: object) -> None:
    """Print the value on its own line."""
    print(arg)


def times_two(num: int) -> int:
    return num * 2


def hello_macro(value: object) -> str:
    """Greet the value: "Hello " followed by it."""
    return f"Hello {value}"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    return num * num


def call_me(num: int) -> None:
    """Print one numbered ring for each call, starting at 1."""
    for number in range(1, num + 1):
        print(f"Ring! Call number {number}")


def bigger(a: int, b: int) -> int:
    """Return the larger of the two numbers."""
    return a if a >= b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def classify_character(char: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    if char.isalpha():
        return "Alphabetical!"
    if char.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def middle_slice(values: Sequence[T]) -> Sequence[T]:
    """Return the values without their first and last element."""
    if len(values) < 2:
        raise ValueError("need at least two values to drop both ends")
    return values[1 : len(values) - 1]


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in _COLOR_WORDS


def _get_secret_recipe() -> str:
    return _SECRET_RECIPE


def make_sausage() -> None:
    """Make a sausage from the secret recipe and announce it."""
    _get_secret_recipe()
    print("sausage!")


def seconds_since_epoch() -> int:
    """Whole seconds elapsed since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


def macro_message(value: object = None) -> str:
    """The plain message without a value, or the message quoting the value."""
    if value is None:
        return "Check out my macro!"
    return f"Look at this other macro: {value}"