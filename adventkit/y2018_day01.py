"""Frequency drift: sum of changes and the first frequency reached twice."""

from __future__ import annotations

from itertools import accumulate, cycle
from typing import Iterable, Sequence


def parse_deltas(text: str) -> list[int]:
    """Read whitespace-separated signed integers."""
    return [int(token) for token in text.split()]


def final_frequency(deltas: Iterable[int]) -> int:
    """Return the frequency after applying every change once, from zero."""
    return sum(deltas)


def first_repeated_frequency(deltas: Sequence[int]) -> int:
    """Return the first running frequency seen twice, cycling through the changes.

    The starting frequency of zero is not counted as seen.
    """
    if not deltas:
        raise ValueError("at least one frequency change is required")
    seen: set[int] = set()
    for frequency in accumulate(cycle(deltas)):
        if frequency in seen:
            return frequency
        seen.add(frequency)
    raise AssertionError("unreachable")


def part_one(text: str) -> int:
    return final_frequency(parse_deltas(text))


def part_two(text: str) -> int:
    return first_repeated_frequency(parse_deltas(text))