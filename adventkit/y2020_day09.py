"""Encoding errors: numbers that break the pair-sum rule, and weak ranges."""

from __future__ import annotations

from itertools import accumulate
from typing import NamedTuple, Sequence

PREAMBLE = 25
TARGET = 756008079


class ContiguousRange(NamedTuple):
    """A slice ``numbers[start:stop]`` with its smallest and largest members."""

    start: int
    stop: int
    smallest: int
    largest: int

    @property
    def weakness(self) -> int:
        return self.smallest + self.largest


def _parse(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def find_invalid(numbers: Sequence[int], preamble: int = PREAMBLE) -> int:
    """Return the index of the first number that is not a sum from the window before it."""
    window = set(numbers[:preamble])
    for index in range(preamble, len(numbers)):
        value = numbers[index]
        if not any(value - member in window for member in window):
            return index
        window.discard(numbers[index - preamble])
        window.add(value)
    raise ValueError("every number follows the rule")


def contiguous_ranges(numbers: Sequence[int], target: int) -> list[ContiguousRange]:
    """Return every run of at least two numbers, not starting first, that sums to ``target``."""
    sums = list(accumulate(numbers))
    found = []
    for end in range(1, len(sums)):
        for before in range(end):
            if sums[end] - sums[before] == target and end - before > 1:
                run = numbers[before + 1:end + 1]
                found.append(ContiguousRange(before + 1, end + 1, min(run), max(run)))
    return found


def part_one(text: str) -> int:
    numbers = _parse(text)
    return numbers[find_invalid(numbers, PREAMBLE)]


def part_two(text: str, target: int = TARGET) -> list[int]:
    return [found.weakness for found in contiguous_ranges(_parse(text), target)]