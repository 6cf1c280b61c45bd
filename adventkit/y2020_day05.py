"""Boarding passes read as binary seat numbers."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

_ONE = frozenset("BR")


def seat_id(code: str) -> int:
    """Read 'B' and 'R' as 1 and every other character as 0."""
    value = 0
    for ch in code:
        value = (value << 1) | (ch in _ONE)
    return value


def gap_seats(seat_ids: Iterable[int]) -> list[int]:
    """Return each missing seat whose two neighbours are both taken."""
    ordered = sorted(seat_ids)
    return [later - 1 for earlier, later in pairwise(ordered) if later - earlier == 2]


def part_one(text: str) -> int:
    ids = [seat_id(code) for code in text.split()]
    if not ids:
        raise ValueError("no boarding passes")
    return max(ids)


def part_two(text: str) -> list[int]:
    return gap_seats(seat_id(code) for code in text.split())