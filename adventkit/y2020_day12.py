"""Ferry navigation, steering the ship directly or by a waypoint."""

from __future__ import annotations

import re
from dataclasses import dataclass

_COMMAND = re.compile(r"([NSEWLRF])(\d+)")


@dataclass(frozen=True)
class NavCommand:
    """An action letter and its amount."""

    action: str
    distance: int


def parse_commands(text: str) -> list[NavCommand]:
    """Read tokens like ``F10`` or ``R90``."""
    commands = []
    for token in text.split():
        match = _COMMAND.fullmatch(token)
        if match is None:
            raise ValueError(f"Improper cmd: {token!r}")
        commands.append(NavCommand(match.group(1), int(match.group(2))))
    return commands


class Ship:
    """A ship at (x, y) with a heading or waypoint (vx, vy)."""

    def __init__(self, waypoint_mode: bool = False) -> None:
        self.waypoint_mode = waypoint_mode
        self.x = 0
        self.y = 0
        self.vx, self.vy = (10, 1) if waypoint_mode else (1, 0)

    def step(self, command: NavCommand) -> None:
        """Carry out one command."""
        action, amount = command.action, command.distance
        moves = {"N": (0, amount), "S": (0, -amount), "E": (amount, 0), "W": (-amount, 0)}
        if action in moves:
            dx, dy = moves[action]
            if self.waypoint_mode:
                self.vx += dx
                self.vy += dy
            else:
                self.x += dx
                self.y += dy
        elif action == "F":
            self.x += self.vx * amount
            self.y += self.vy * amount
        elif action == "R":
            self.turn(amount // 90)
        elif action == "L":
            self.turn(-(amount // 90))
        else:
            raise ValueError(f"Improper cmd: {action!r}")

    def turn(self, count: int) -> None:
        """Rotate the heading clockwise by ``count`` quarter turns."""
        for _ in range(count % 4):
            self.vx, self.vy = self.vy, -self.vx

    def distance(self) -> int:
        """Return the taxicab distance from the start."""
        return abs(self.x) + abs(self.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}@{self.vx},{self.vy}"


def _sail(text: str, waypoint_mode: bool) -> int:
    ship = Ship(waypoint_mode)
    for command in parse_commands(text):
        ship.step(command)
    return ship.distance()


def part_one(text: str) -> int:
    return _sail(text, False)


def part_two(text: str) -> int:
    return _sail(text, True)