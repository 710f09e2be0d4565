"""Basics: comparisons, prices, lists, optional values and messages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return b if a < b else a


def foo_if_fizz(fizzish: str) -> str:
    """Map ``fizz`` to ``foo``, ``fuzz`` to ``bar`` and anything else to ``baz``."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """Return True for an even number."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` squared."""
    return num * num


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of ``values`` in place and return the list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list holding every element doubled."""
    return [value * 2 for value in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Return the ice creams left at an hour, or None for an hour past 23."""
    if time_of_day > 23:
        return None
    if time_of_day >= 22:
        return 0
    return 5


@dataclass(frozen=True)
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to the given RGB components."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Print a piece of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class MessageState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    should_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.should_quit = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")