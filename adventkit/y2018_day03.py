"""Fabric claims: counting overlapping square inches."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

_CLAIM = re.compile(r"#\s*(\d+)\s*@\s*(\d+)\s*,\s*(\d+)\s*:\s*(\d+)\s*x\s*(\d+)")

FABRIC_SIZE = 1000


@dataclass(frozen=True)
class Claim:
    """A rectangular claim on the fabric."""

    id: int
    x: int
    y: int
    width: int
    height: int


def parse_claims(text: str) -> list[Claim]:
    """Parse lines of the form ``#123 @ 3,2: 5x4``."""
    claims = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _CLAIM.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed claim: {line!r}")
        claims.append(Claim(*map(int, match.groups())))
    return claims


class Fabric:
    """A bounded sheet that counts how many claims cover each square."""

    def __init__(self, width: int = FABRIC_SIZE, height: int = FABRIC_SIZE) -> None:
        self.width = width
        self.height = height
        self._cover: Counter[tuple[int, int]] = Counter()

    def count(self, x: int, y: int) -> int:
        """Return how many claims cover the square at ``(x, y)``."""
        return self._cover[(x, y)]

    def add_claim(self, claim: Claim) -> None:
        """Cover every square of ``claim`` that lies on the fabric."""
        for x in range(claim.x, claim.x + claim.width):
            for y in range(claim.y, claim.y + claim.height):
                if x < self.width and y < self.height:
                    self._cover[(x, y)] += 1

    def count_overlaps(
        self, x: int = 0, y: int = 0, width: int | None = None, height: int | None = None
    ) -> int:
        """Count squares in the region covered by more than one claim."""
        width = self.width if width is None else width
        height = self.height if height is None else height
        return sum(
            1
            for (cx, cy), n in self._cover.items()
            if n > 1 and x <= cx < x + width and y <= cy < y + height
        )


def _fabric_with(claims: Iterable[Claim], width: int, height: int) -> Fabric:
    fabric = Fabric(width, height)
    for claim in claims:
        fabric.add_claim(claim)
    return fabric


def non_overlapping_claims(
    claims: Iterable[Claim], width: int = FABRIC_SIZE, height: int = FABRIC_SIZE
) -> list[int]:
    """Return the ids of claims that share no square with another claim."""
    claims = list(claims)
    fabric = _fabric_with(claims, width, height)
    return [
        claim.id
        for claim in claims
        if fabric.count_overlaps(claim.x, claim.y, claim.width, claim.height) == 0
    ]


def part_one(text: str) -> int:
    return _fabric_with(parse_claims(text), FABRIC_SIZE, FABRIC_SIZE).count_overlaps()


def part_two(text: str) -> list[int]:
    return non_overlapping_claims(parse_claims(text))