"""Camp cleanup: section ranges that contain or overlap each other."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PAIR = re.compile(r"(\d+)-(\d+),(\d+)-(\d+)")


@dataclass(frozen=True)
class Span:
    """An inclusive range of section numbers."""

    start: int
    finish: int

    def contains(self, other: Span) -> bool:
        """Tell whether ``other`` lies wholly within this span."""
        return self.start <= other.start and other.finish <= self.finish

    def overlaps(self, other: Span) -> bool:
        """Tell whether the two spans share a section."""
        return self.start <= other.finish and self.finish >= other.start


def parse_assignments(text: str) -> list[tuple[Span, Span]]:
    """Read lines like ``2-4,6-8``."""
    pairs = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _PAIR.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed assignment: {line!r}")
        a, b, c, d = map(int, match.groups())
        pairs.append((Span(a, b), Span(c, d)))
    return pairs


def part_one(text: str) -> int:
    return sum(a.contains(b) or b.contains(a) for a, b in parse_assignments(text))


def part_two(text: str) -> int:
    return sum(a.overlaps(b) or b.overlaps(a) for a, b in parse_assignments(text))