"""Box identifiers: letter-count checksums and near-identical pairs."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def has_letter_count(box_id: str, n: int) -> bool:
    """Tell whether some letter occurs exactly ``n`` times in ``box_id``."""
    return n in Counter(box_id).values()


def letter_count_totals(box_ids: Iterable[str]) -> tuple[int, int]:
    """Return how many ids have a letter twice and how many have one three times."""
    ids = list(box_ids)
    twos = sum(has_letter_count(box_id, 2) for box_id in ids)
    threes = sum(has_letter_count(box_id, 3) for box_id in ids)
    return twos, threes


def differs_by_one(a: str, b: str) -> bool:
    """Tell whether two equal-length strings differ at exactly one position."""
    if len(a) != len(b):
        raise ValueError("The strings must be the same size")
    return sum(x != y for x, y in zip(a, b)) == 1


def similar_pairs(box_ids: Sequence[str]) -> list[tuple[str, str]]:
    """Return every ordered pair of ids that differ at exactly one position."""
    return [(a, b) for a in box_ids for b in box_ids if differs_by_one(a, b)]


def part_one(text: str) -> tuple[int, int]:
    return letter_count_totals(text.split())


def part_two(text: str) -> list[tuple[str, str]]:
    return similar_pairs(text.split())