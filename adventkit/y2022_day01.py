"""Calorie counting: the elves carrying the most."""

from __future__ import annotations

from typing import Iterable, Sequence

TOP_COUNT = 6


def parse_elves(text: str) -> list[list[int]]:
    """Split blank-line separated groups of calorie counts."""
    elves: list[list[int]] = []
    current: list[int] = []
    for line in text.splitlines() + [""]:
        if line.strip():
            current.append(int(line))
        elif current:
            elves.append(current)
            current = []
    return elves


def elf_totals(elves: Iterable[Sequence[int]]) -> list[int]:
    """Return the calories each elf carries."""
    return [sum(elf) for elf in elves]


def top_total(totals: Sequence[int], count: int) -> int:
    """Return the calories carried by the ``count`` best-stocked elves together."""
    if not 0 <= count <= len(totals):
        raise ValueError(f"cannot pick {count} of {len(totals)} elves")
    return sum(sorted(totals, reverse=True)[:count])


def solve(text: str, count: int = TOP_COUNT) -> int:
    return top_total(elf_totals(parse_elves(text)), count)