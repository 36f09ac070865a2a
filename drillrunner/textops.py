"""String helpers: colour words, trimming, composing, replacing and appending."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Add " world!" to the end of the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """The longer of two strings by UTF-8 byte length; y when they tie."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar" to a string, or add "Bar" as a new item to a list of strings."""
    if isinstance(value, str):
        return value + "Bar"
    if isinstance(value, list):
        return [*value, "Bar"]
    raise TypeError(f"cannot append Bar to {type(value).__name__}")