"""Basic control flow: message processing, options and simple branches."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the color to the given RGB values."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Move:
    """Move to the given point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Request to quit."""


@dataclass(frozen=True)
class Echo:
    """Store the given text as the current message."""

    text: str


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False
    message: str = ""

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        self.message = text

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: ChangeColor | Move | Quit | Echo) -> None:
        match message:
            case Quit():
                self.quit()
            case ChangeColor(red=r, green=g, blue=b):
                self.change_color((r, g, b))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case _:
                raise TypeError(f"unknown message: {message!r}")


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at the given hour: 5 before 22, then 0; None past 24."""
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day > 24:
        return None
    if time_of_day < 22:
        return 5
    return 0


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    if is_even(price):
        return price - 10
    return price - 3


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")