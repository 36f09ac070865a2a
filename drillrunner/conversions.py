"""Conversions into a Person from text and into a Color from numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)
_USIZE_MAX = 2**64 - 1


def _parse_usize(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _USIZE_MAX else None


@dataclass(frozen=True)
class Person:
    """A named person with an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> "Person":
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> "Person":
        """Parse "name,age"; fall back to the default person on any problem."""
        if not text:
            return cls.default()
        items = text.split(",")
        if len(items) < 2:
            return cls.default()
        name = items[0]
        if not name:
            return cls.default()
        age = _parse_usize(items[1])
        if age is None:
            return cls.default()
        return cls(name=name, age=age)


class IntoColorError(Exception):
    """A color could not be built from the given values."""


class ColorBadLength(IntoColorError):
    """The number of values is not three."""


class ColorIntConversion(IntoColorError):
    """A value lies outside the accepted range."""


@dataclass(frozen=True)
class Color:
    """An RGB color."""

    red: int
    green: int
    blue: int

    @classmethod
    def _checked(cls, red: int, green: int, blue: int) -> "Color":
        if any(value < 1 or value > 255 for value in (red, green, blue)):
            raise ColorIntConversion("color components must lie in 1..=255")
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_tuple(cls, values: tuple[int, int, int]) -> "Color":
        red, green, blue = values
        return cls._checked(red, green, blue)

    @classmethod
    def from_array(cls, values: Sequence[int]) -> "Color":
        red, green, blue = values
        return cls._checked(red, green, blue)

    @classmethod
    def from_slice(cls, values: Sequence[int]) -> "Color":
        if len(values) != 3:
            raise ColorBadLength("a color needs exactly three components")
        red, green, blue = values
        return cls._checked(red, green, blue)