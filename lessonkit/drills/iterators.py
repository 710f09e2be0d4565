"""Iteration: capitalising words, checked division, factorials and progress counts."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum

U64_MAX = 2**64 - 1

DIVISION_NUMBERS = (27, 297, 38502, 81)
DIVISION_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Return ``text`` with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word, returning a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A checked division could not produce a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not an exact multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return ``a / b`` when ``a`` is evenly divisible by ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27, raising at the first failure."""
    return [divide(number, DIVISION_DIVISOR) for number in DIVISION_NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as error:
        return error


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping each quotient or error."""
    return [_try_divide(number, DIVISION_DIVISOR) for number in DIVISION_NUMBERS]


def factorial(num: int) -> int:
    """Return ``num!`` for a non-negative number whose factorial fits in 64 bits."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result


class Progress(Enum):
    """How far an exercise has been worked through."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value`` with an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value`` with an iterator."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries equal to ``value`` across maps with explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries equal to ``value`` across maps with iterators."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)