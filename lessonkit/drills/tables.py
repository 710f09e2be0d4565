"""Mappings: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)
_U8_MAX = 255


def basic_fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds of fruit and five fruits in all."""
    return {"banana": 2, "apple": 2, "mango": 1}


class Fruit(Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit not already in ``basket``."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goals scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of ``team1,team2,goals1,goals2``."""
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

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores