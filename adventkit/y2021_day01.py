"""Sonar sweep: counting depth increases."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable


def count_increases(depths: Iterable[int]) -> int:
    """Count readings larger than the one before."""
    return sum(later > earlier for earlier, later in pairwise(depths))


def count_window_increases(depths: Iterable[int]) -> int:
    """Count three-reading window sums larger than the previous window sum.

    A comparison against a previous window whose sum is zero is not counted.
    """
    values = list(depths)
    sums = [sum(window) for window in zip(values, values[1:], values[2:])]
    return sum(1 for earlier, later in pairwise(sums) if earlier != 0 and later > earlier)


def part_one(text: str) -> int:
    return count_increases(int(token) for token in text.split())


def part_two(text: str) -> int:
    return count_window_increases(int(token) for token in text.split())