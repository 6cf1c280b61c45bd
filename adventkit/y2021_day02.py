"""Submarine steering, plain and with aim."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Command:
    """A forward move and a change of depth (or aim); up is negative."""

    forward: int = 0
    aim: int = 0


def parse_commands(text: str) -> list[Command]:
    """Parse ``forward N``, ``up N`` and ``down N`` commands."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every command needs an amount")
    commands = []
    for direction, amount in zip(tokens[::2], tokens[1::2]):
        value = int(amount)
        if direction == "forward":
            commands.append(Command(value, 0))
        elif direction == "up":
            commands.append(Command(0, -value))
        elif direction == "down":
            commands.append(Command(0, value))
        else:
            raise ValueError(f"unknown direction: {direction!r}")
    return commands


def plain_position(commands: Iterable[Command]) -> tuple[int, int]:
    """Return (horizontal, depth) when up and down change depth directly."""
    horizontal = depth = 0
    for command in commands:
        horizontal += command.forward
        depth += command.aim
    return horizontal, depth


def aimed_position(commands: Iterable[Command]) -> tuple[int, int]:
    """Return (horizontal, depth) when up and down change the aim."""
    horizontal = depth = aim = 0
    for command in commands:
        aim += command.aim
        horizontal += command.forward
        depth += command.forward * aim
    return horizontal, depth


def part_one(text: str) -> int:
    horizontal, depth = plain_position(parse_commands(text))
    return horizontal * depth


def part_two(text: str) -> int:
    horizontal, depth = aimed_position(parse_commands(text))
    return horizontal * depth