"""Customs answers: questions answered by everyone or by anyone in a group."""

from __future__ import annotations

from functools import reduce
from typing import Sequence


def parse_groups(text: str) -> list[list[str]]:
    """Split blank-line separated groups into lists of answer lines."""
    groups: list[list[str]] = []
    current: list[str] = []
    for line in text.splitlines() + [""]:
        if line:
            current.append(line)
        elif current:
            groups.append(current)
            current = []
    return groups


def everyone_count(group: Sequence[str]) -> int:
    """Count questions answered by every member of the group."""
    if not group:
        return 0
    return len(reduce(lambda common, line: common & set(line), group[1:], set(group[0])))


def anyone_count(group: Sequence[str]) -> int:
    """Count questions answered by at least one member of the group."""
    return len(set().union(*group))


def part_one(text: str) -> int:
    return sum(everyone_count(group) for group in parse_groups(text))


def part_two(text: str) -> int:
    return sum(anyone_count(group) for group in parse_groups(text))