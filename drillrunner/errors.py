"""Error handling: integer parsing, people from text, nametags and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = "0123456789"


class IntErrorKind(enum.Enum):
    """Why an integer could not be parsed."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"
    NEG_OVERFLOW = "number too small to fit in target type"


class ParseIntError(ValueError):
    """Text that is not a valid integer of the wanted range."""

    def __init__(self, kind: IntErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseIntError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


def _parse_int(text: str, signed: bool, bits: int) -> int:
    if not text:
        raise ParseIntError(IntErrorKind.EMPTY)
    if text in ("+", "-"):
        raise ParseIntError(IntErrorKind.INVALID_DIGIT)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    negative = False
    digits = text
    if digits[0] == "+":
        digits = digits[1:]
    elif digits[0] == "-" and signed:
        negative = True
        digits = digits[1:]
    value = 0
    for char in digits:
        if char not in _DIGITS:
            raise ParseIntError(IntErrorKind.INVALID_DIGIT)
        digit = _DIGITS.index(char)
        value = value * 10 - digit if negative else value * 10 + digit
        if value > high:
            raise ParseIntError(IntErrorKind.POS_OVERFLOW)
        if value < low:
            raise ParseIntError(IntErrorKind.NEG_OVERFLOW)
    return value


def parse_int(text: str, signed: bool = True) -> int:
    """Parse a 64-bit integer, signed or unsigned, raising ParseIntError."""
    return _parse_int(text, signed, 64)


class ParsePersonError(ValueError):
    """A person could not be parsed from text."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePersonError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ParsePersonEmpty(ParsePersonError):
    """The input text was empty."""


class ParsePersonBadLen(ParsePersonError):
    """The input did not hold exactly two fields."""


class ParsePersonNoName(ParsePersonError):
    """The name field was empty."""


class ParsePersonParseInt(ParsePersonError):
    """The age field was not a valid number."""

    def __init__(self, error: ParseIntError) -> None:
        super().__init__(error)
        self.error = error


@dataclass(frozen=True)
class Person:
    """A named person with an age."""

    name: str
    age: int

    @classmethod
    def parse(cls, text: str) -> "Person":
        """Parse exactly "name,age", raising a ParsePersonError on any problem."""
        if not text:
            raise ParsePersonEmpty()
        items = text.split(",")
        if len(items) != 2:
            raise ParsePersonBadLen()
        name, age_text = items
        if not name:
            raise ParsePersonNoName()
        try:
            age = _parse_int(age_text, False, 64)
        except ParseIntError as exc:
            raise ParsePersonParseInt(exc) from exc
        return cls(name=name, age=age)


def generate_nametag_text(name: str) -> str:
    """Nametag text for a non-empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a processing fee of one."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, True, 32)
    cost = qty * cost_per_item + processing_fee
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""

    message = "invalid value"

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class CreationErrorNegative(CreationError):
    """The value was negative."""

    message = "number is negative"


class CreationErrorZero(CreationError):
    """The value was zero."""

    message = "number is zero"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> "PositiveNonzeroInteger":
        if value < 0:
            raise CreationErrorNegative()
        if value == 0:
            raise CreationErrorZero()
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Parsing failed, either as an integer or as a positive non-zero value."""

    def __init__(self, cause: CreationError | ParseIntError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_creation(cls, error: CreationError) -> "ParsePosNonzeroError":
        return cls(error)

    @classmethod
    def from_parse_int(cls, error: ParseIntError) -> "ParsePosNonzeroError":
        return cls(error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return self.cause == other.cause

    def __hash__(self) -> int:
        return hash(self.cause)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, True, 64)
    except ParseIntError as exc:
        raise ParsePosNonzeroError.from_parse_int(exc) from exc
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc