"""Red-nosed reports: level sequences that change safely."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence


def parse_reports(text: str) -> list[list[int]]:
    """Read one report of levels per line, stopping at the first blank line."""
    reports = []
    for line in text.splitlines():
        levels = [int(token) for token in line.split()]
        if not levels:
            break
        reports.append(levels)
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """Tell whether the levels move in one direction by steps of 1 to 3."""
    steps = [later - earlier for earlier, later in pairwise(levels)]
    if not steps:
        return True
    rising = steps[-1] > 0
    return all((step > 0) == rising and 1 <= abs(step) <= 3 for step in steps)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """Tell whether the report is safe, or becomes safe with one level removed."""
    levels = list(levels)
    if is_safe(levels):
        return True
    return any(is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels)))


def part_one(text: str) -> int:
    return sum(is_safe(report) for report in parse_reports(text))


def part_two(text: str) -> int:
    return sum(is_safe_with_dampener(report) for report in parse_reports(text))