"""Iterator exercises: capitalisation, checked division, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Mapping, Sequence

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word, returning a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not produce an exact integer result."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivisionError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(dividend, divisor)
        self.dividend = dividend
        self.divisor = divisor

    def __str__(self) -> str:
        return f"{self.dividend} is not divisible by {self.divisor}"


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __str__(self) -> str:
        return "division by zero"


def divide(a: int, b: int) -> int:
    """Divide a by b when a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    quotient, remainder = divmod(abs(a), abs(b))
    if remainder != 0:
        raise NotDivisibleError(a, b)
    return quotient if (a < 0) == (b < 0) else -quotient


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27, keeping the successful results."""
    results = []
    for number in _NUMBERS:
        try:
            results.append(divide(number, _DIVISOR))
        except DivisionError:
            continue
    return results


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping each result or its error."""
    results: list[int | DivisionError] = []
    for number in _NUMBERS:
        try:
            results.append(divide(number, _DIVISOR))
        except DivisionError as exc:
            results.append(exc)
    return results


def factorial(num: int) -> int:
    """Factorial of a non-negative number that fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has been worked through."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across all maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)