"""Exercises on records, generic containers and adding behaviour to values."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


@dataclass
class ColorClassic:
    """A color with named fields."""

    name: str
    hex: str


class ColorTuple(NamedTuple):
    """A color whose fields are also reachable by position."""

    name: str
    hex: str


class UnitStruct:
    """A value that carries no data."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """An order to copy from when making new orders."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


class Package:
    """A parcel sent between two countries."""

    def __init__(self, sender_country: str, recipient_country: str, weight_in_grams: int) -> None:
        if weight_in_grams <= 0:
            raise ValueError("weight_in_grams must be positive")
        self.sender_country = sender_country
        self.recipient_country = recipient_country
        self.weight_in_grams = weight_in_grams

    def __repr__(self) -> str:
        return (
            f"Package(sender_country={self.sender_country!r}, "
            f"recipient_country={self.recipient_country!r}, "
            f"weight_in_grams={self.weight_in_grams!r})"
        )

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


def shopping_list() -> list[str]:
    """A shopping list with milk on it."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass
class ReportCard(Generic[T]):
    """A student's report with a numeric or alphabetical grade."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"


@functools.singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string, or add "Bar" as a new item of a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]