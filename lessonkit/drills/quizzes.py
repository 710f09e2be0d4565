"""Small quizzes: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

BULK_THRESHOLD = 40
REGULAR_PRICE = 2
BULK_PRICE = 1


def calculate_price_of_apples(quantity: int) -> int:
    """Price an order: 2 each, or 1 each when more than 40 are bought."""
    if quantity <= BULK_THRESHOLD:
        return REGULAR_PRICE * quantity
    return BULK_PRICE * quantity


class Command(Protocol):
    """A transformation applied to a piece of text."""

    def apply(self, text: str) -> str: ...


@dataclass(frozen=True)
class Uppercase:
    """Turn the text into upper case."""

    def apply(self, text: str) -> str:
        return text.upper()


@dataclass(frozen=True)
class Trim:
    """Remove whitespace from both ends of the text."""

    def apply(self, text: str) -> str:
        return text.strip()


@dataclass(frozen=True)
class Append:
    """Append ``"bar"`` to the text ``count`` times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must not be negative")

    def apply(self, text: str) -> str:
        return text + "bar" * self.count


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its paired string, keeping the input order."""
    return [command.apply(text) for text, command in items]


@dataclass(frozen=True)
class ReportCard:
    """A student's report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        """Return the report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )