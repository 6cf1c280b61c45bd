"""Rope bridge: knots that follow the head around the plane."""

from __future__ import annotations

from typing import Iterable

from adventkit.common import Coord2i

_DIRECTIONS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def sign(value: int) -> int:
    """Return -1, 0 or 1 following the sign of ``value``."""
    if value == 0:
        return 0
    return -1 if value < 0 else 1


def parse_moves(text: str) -> list[Coord2i]:
    """Read lines like ``R 4`` as displacement vectors."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every move needs an amount")
    moves = []
    for direction, amount in zip(tokens[::2], tokens[1::2]):
        try:
            dx, dy = _DIRECTIONS[direction[0].upper()]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        steps = int(amount)
        moves.append(Coord2i(dx * steps, dy * steps))
    return moves


class Rope:
    """A chain of knots; each follows the one before it."""

    def __init__(self, knots: int = 2) -> None:
        if knots < 1:
            raise ValueError("a rope needs at least one knot")
        start = Coord2i()
        self.knots = [start] * knots
        self.visited: list[set[Coord2i]] = [{start} for _ in range(knots)]

    def move(self, movement: Coord2i) -> None:
        """Move the head one step at a time along ``movement``."""
        steps = max(abs(movement.x), abs(movement.y))
        direction = Coord2i(sign(movement.x), sign(movement.y))
        for _ in range(steps):
            self.knots[0] = self.knots[0] + direction
            self.visited[0].add(self.knots[0])
            for index in range(1, len(self.knots)):
                self._follow(index)

    def _follow(self, index: int) -> None:
        gap = self.knots[index - 1] - self.knots[index]
        if abs(gap.x) <= 1 and abs(gap.y) <= 1:
            return
        self.knots[index] = self.knots[index] + Coord2i(sign(gap.x), sign(gap.y))
        self.visited[index].add(self.knots[index])

    def tail_visits(self) -> int:
        """Count the distinct positions the last knot has occupied."""
        return len(self.visited[-1])


def _simulate(moves: Iterable[Coord2i], knots: int) -> int:
    rope = Rope(knots)
    for movement in moves:
        rope.move(movement)
    return rope.tail_visits()


def part_one(text: str) -> int:
    return _simulate(parse_moves(text), 2)


def part_two(text: str) -> int:
    return _simulate(parse_moves(text), 10)