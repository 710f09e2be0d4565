"""String handling: trimming, composing, replacing and appending ``Bar``."""

from __future__ import annotations

from functools import singledispatch

BAR = "Bar"


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of ``text``."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append `` world!`` to ``text``."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every ``cars`` in ``text`` with ``balloons``."""
    return text.replace("cars", "balloons")


@singledispatch
def append_bar(value):
    """Append ``Bar`` to a string, or add a ``Bar`` element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, BAR]