"""Exercises on shared data across threads, recursive lists, iterators and errors."""

from __future__ import annotations

import enum
import itertools
import math
import threading
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

_DIVISION_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every ``workers``-th number, one thread per offset, sharing one sequence.

    Each thread prints its sum; the sums are returned in offset order.
    """
    if workers <= 0:
        raise ValueError("workers must be positive")
    sums = [0] * workers

    def worker(offset: int) -> None:
        total = sum(itertools.islice(numbers, offset, None, workers))
        sums[offset] = total
        print(f"Sum of offset {offset} is {total}")

    threads = [threading.Thread(target=worker, args=(offset,)) for offset in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return sums


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; a tail of None marks the end of the list."""

    head: int
    tail: Cons | None = None


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding the single value 0."""
    return Cons(0, create_empty_list())


def capitalize_first(text: str) -> str:
    """Upper-case the first character and keep the rest as it is."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them with nothing in between."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide each number by 27; the first failure is raised."""
    return [divide(number, _DIVISOR) for number in _DIVISION_NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as error:
        return error


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each failure in place of its result."""
    return [_try_divide(number, _DIVISOR) for number in _DIVISION_NUMBERS]


def factorial(num: int) -> int:
    """The product 1 * 2 * ... * num; 1 for 0."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))


class Progress(enum.Enum):
    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)