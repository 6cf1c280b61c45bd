"""Toboggan slopes: counting trees along a wrapping hill."""

from __future__ import annotations

from math import prod
from typing import Sequence

SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def parse_hill(text: str) -> list[str]:
    """Read the hill as rows of '.' and '#'."""
    return text.split()


def count_trees(hill: Sequence[str], right: int, down: int = 1) -> int:
    """Count trees met going ``right`` and ``down`` each step, wrapping sideways."""
    if not hill:
        raise ValueError("the hill is empty")
    if down < 1:
        raise ValueError("the downward step must be positive")
    width = len(hill[0])
    trees = 0
    column = 0
    for row in hill[::down]:
        trees += row[column] == "#"
        column = (column + right) % width
    return trees


def part_one(text: str) -> int:
    return count_trees(parse_hill(text), 3, 1)


def part_two(text: str) -> int:
    hill = parse_hill(text)
    return prod(count_trees(hill, right, down) for right, down in SLOPES)