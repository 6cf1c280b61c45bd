"""Rock, paper, scissors strategy guide scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_OUTCOME_POINTS = {0: 3, 1: 0, 2: 6}


class Hand(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2


@dataclass(frozen=True)
class Game:
    """One round: the opponent's hand and ours."""

    theirs: Hand
    mine: Hand

    def score(self) -> int:
        """Return our hand's value plus 0, 3 or 6 for a loss, draw or win."""
        outcome = (self.theirs - self.mine) % 3
        return int(self.mine) + 1 + _OUTCOME_POINTS[outcome]


def _code(token: str, letters: str) -> int:
    index = letters.find(token[:1])
    if not token or index < 0:
        raise ValueError(f"expected one of {letters}, got {token!r}")
    return index


def parse_games(text: str, by_outcome: bool = False) -> list[Game]:
    """Read pairs like ``A Y``.

    The second column is our hand, or with ``by_outcome`` the result we need
    (X lose, Y draw, Z win).
    """
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every round needs two columns")
    games = []
    for first, second in zip(tokens[::2], tokens[1::2]):
        theirs = _code(first, "ABC")
        mine = _code(second, "XYZ")
        if by_outcome:
            mine = (theirs + mine - 1) % 3
        games.append(Game(Hand(theirs), Hand(mine)))
    return games


def part_one(text: str) -> int:
    return sum(game.score() for game in parse_games(text))


def part_two(text: str) -> int:
    return sum(game.score() for game in parse_games(text, by_outcome=True))