"""Password policies checked by letter count or by position."""

from __future__ import annotations

import re
from dataclasses import dataclass

_ENTRY = re.compile(r"\s*(\d+)-(\d+)\s+(\S):\s*(\S+)\s*")


@dataclass(frozen=True)
class Policy:
    """Two numbers and a letter, read as bounds or as one-based positions."""

    first: int
    second: int
    letter: str

    def valid_by_count(self, password: str) -> bool:
        """Tell whether the letter occurs between ``first`` and ``second`` times."""
        return self.first <= password.count(self.letter) <= self.second

    def valid_by_position(self, password: str) -> bool:
        """Tell whether exactly one of the two positions holds the letter."""
        return self._at(password, self.first) != self._at(password, self.second)

    def _at(self, password: str, position: int) -> bool:
        if position < 1:
            raise ValueError("positions start at 1")
        return position <= len(password) and password[position - 1] == self.letter


def parse_entries(text: str) -> list[tuple[Policy, str]]:
    """Parse lines of the form ``1-3 a: abcde``."""
    entries = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ENTRY.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed entry: {line!r}")
        first, second, letter, password = match.groups()
        entries.append((Policy(int(first), int(second), letter), password))
    return entries


def part_one(text: str) -> int:
    return sum(policy.valid_by_count(password) for policy, password in parse_entries(text))


def part_two(text: str) -> int:
    return sum(policy.valid_by_position(password) for policy, password in parse_entries(text))