"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a signed decimal integer that must fit in ``low..=high``."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag, refusing an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of the typed quantity, raising ValueError if it is not a number."""
    quantity = _parse_int(item_quantity, I32_MIN, I32_MAX)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


class CreationError(Exception):
    """A PositiveNonzeroInteger could not be created."""


class NegativeValueError(CreationError):
    """The value was negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroValueError(CreationError):
    """The value was zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap ``value``, raising a CreationError when it is negative or zero."""
        if value < 0:
            raise NegativeValueError()
        if value == 0:
            raise ZeroValueError()
        return cls(value)


class ParsePosNonzeroError(Exception):
    """Text could not be turned into a PositiveNonzeroInteger.

    ``cause`` is either a CreationError or the ValueError raised while parsing.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse ``text`` into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(text, I64_MIN, I64_MAX)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc