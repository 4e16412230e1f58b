"""Exercises on handing lists to functions: copies, in-place changes and new values."""

from __future__ import annotations

from collections.abc import Iterable

_FILL = (22, 44, 66)
_FIRST_BUMP = 100
_SECOND_BUMP = 1000


def fill_vec(vec: Iterable[int]) -> list[int]:
    """Return a new list holding the given values followed by the fill values."""
    filled = list(vec)
    filled.extend(_FILL)
    return filled


def fill_in_place(vec: list[int]) -> list[int]:
    """Append the fill values to the list itself and return that same list."""
    vec.extend(_FILL)
    return vec


def fill_new_vec() -> list[int]:
    """Create a fresh list holding only the fill values."""
    return fill_vec(())


def bump(x: int) -> int:
    """Apply the two increments one after the other."""
    x += _FIRST_BUMP
    x += _SECOND_BUMP
    return x