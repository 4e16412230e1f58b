"""Exercises on tagged messages, optional values and small numeric lints."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import MutableSequence, Union


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print a text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new RGB color."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = Union[Move, Echo, ChangeColor, Quit]


@dataclass
class GameState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(text)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message {message!r}")


def print_number(maybe_number: int | None) -> None:
    """Print the number; a missing number is an error."""
    if maybe_number is None:
        raise ValueError("called print_number without a number")
    print(f"printing: {maybe_number}")


def drain_some(values: MutableSequence[int | None]) -> list[int]:
    """Pop values from the end, printing each, until the list is empty or a None is popped."""
    drained = []
    while values:
        item = values.pop()
        if item is None:
            break
        print(f"current value: {item}")
        drained.append(item)
    return drained


def describe_point(point: Point | None) -> str:
    """Print and return the point's coordinates, or "no match" when there is none."""
    if point is None:
        text = "no match"
    else:
        text = f"Co-ordinates are {point.x},{point.y} "
    print(text)
    return text


def circle_area(radius: float) -> float:
    return math.pi * radius**2


def add_optional(res: int, option: int | None) -> int:
    """Add the optional value to ``res`` when it is present."""
    if option is not None:
        res += option
    return res