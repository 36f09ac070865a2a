"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    if quantity > 40:
        return quantity
    return quantity * 2


class _Kind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation applied to a string."""

    kind: _Kind
    count: int = 0

    @classmethod
    def uppercase(cls) -> "Command":
        return cls(_Kind.UPPERCASE)

    @classmethod
    def trim(cls) -> "Command":
        return cls(_Kind.TRIM)

    @classmethod
    def append(cls, count: int) -> "Command":
        if count < 0:
            raise ValueError("append count must not be negative")
        return cls(_Kind.APPEND, count)

    def apply(self, text: str) -> str:
        if self.kind is _Kind.UPPERCASE:
            return text.upper()
        if self.kind is _Kind.TRIM:
            return text.strip()
        return text + "bar" * self.count


def transformer(inputs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in inputs]


def _display(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard:
    """A student's report card with a grade of any printable type."""

    grade: Any
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )