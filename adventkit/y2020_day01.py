"""Expense report: entries that sum to a target."""

from __future__ import annotations

from typing import Iterable

TARGET = 2020


def _parse(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def pair_product(values: Iterable[int], total: int = TARGET) -> int:
    """Return x * (total - x) for the first x whose complement is also present."""
    entries = dict.fromkeys(values)
    for x in entries:
        if total - x in entries:
            return x * (total - x)
    raise ValueError(f"no two entries sum to {total}")


def triple_product(values: Iterable[int], total: int = TARGET) -> int:
    """Return the product of three entries summing to ``total``.

    The first two entries must differ; the third is looked up by value.
    """
    entries = dict.fromkeys(values)
    for first in entries:
        for second in entries:
            third = total - first - second
            if first != second and third in entries:
                return first * second * third
    raise ValueError(f"no three entries sum to {total}")


def part_one(text: str) -> int:
    return pair_product(_parse(text))


def part_two(text: str) -> int:
    return triple_product(_parse(text))