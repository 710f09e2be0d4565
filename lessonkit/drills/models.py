"""Structured data: orders, packages, licensed software and a generic wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

LICENSING_INFO = "Some information"


@dataclass(frozen=True)
class Order:
    """A customer's order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the template order that new orders are derived from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """Return True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Return the transport fee in cents."""
        return self.weight_in_grams * cents_per_gram


class Licensed:
    """Software that carries licensing information."""

    def licensing_info(self) -> str:
        return LICENSING_INFO


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True when both programs carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T