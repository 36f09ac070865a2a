"""Tallies kept in dictionaries and lists: fruit baskets, score tables, doubling."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Generic, MutableMapping, TypeVar

T = TypeVar("T")

_U8 = re.compile(r"\+?[0-9]+", re.ASCII)
_U8_MAX = 255


def starter_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 5, "mango": 1}


class Fruit(enum.Enum):
    """Kinds of fruit that go into the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add three of every kind of fruit not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 3)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _U8.fullmatch(text) or int(text) > _U8_MAX:
        raise ValueError(f"invalid goal count: {text!r}")
    return int(text)


def _add(current: int, extra: int) -> int:
    total = current + extra
    if total > _U8_MAX:
        raise OverflowError("goal count does not fit in 8 bits")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    lines = results.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for raw in lines:
        line = raw[:-1] if raw.endswith("\r") else raw
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_conceded = _add(team_1.goals_conceded, team_2_score)
        team_1.goals_scored = _add(team_1.goals_scored, team_1_score)

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_conceded = _add(team_2.goals_conceded, team_1_score)
        team_2.goals_scored = _add(team_2.goals_scored, team_2_score)
    return scores


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T