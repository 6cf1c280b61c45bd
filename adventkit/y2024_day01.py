"""Historian hysteria: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split interleaved numbers into the left and right columns.

    A trailing number without a partner is ignored.
    """
    values = [int(token) for token in text.split()]
    if any(value < 0 for value in values):
        raise ValueError("location ids must not be negative")
    pairs = len(values) // 2
    return values[0:2 * pairs:2], values[1:2 * pairs:2]


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum the gaps between the two lists paired smallest to smallest."""
    if len(left) != len(right):
        raise ValueError("the lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left number times how often it appears on the right."""
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


def part_one(text: str) -> int:
    return total_distance(*parse_lists(text))


def part_two(text: str) -> int:
    return similarity(*parse_lists(text))