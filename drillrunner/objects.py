"""Small object models: packages, licensed software and cons lists."""

from __future__ import annotations

from dataclasses import dataclass

_MIN_WEIGHT_GRAMS = 10


@dataclass(frozen=True)
class Package:
    """A parcel sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_WEIGHT_GRAMS:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents."""
        if cents_per_gram < 0:
            raise ValueError("cents per gram must not be negative")
        return cents_per_gram * self.weight_in_grams


class Licensed:
    """Software that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: "Cons | Nil"


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(0, Cons(1, Nil()))