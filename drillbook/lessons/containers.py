"""Exercises on lists, tuples and dictionaries."""

from __future__ import annotations

import enum
from typing import Iterable, MutableMapping


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket holding at least three kinds and five fruits in total."""
    return {"banana": 2, "apple": 2, "lemon": 2}


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add ten of every kind of fruit missing from the basket, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same four numbers as a fixed tuple and as a list."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return every value doubled."""
    return [value * 2 for value in values]