"""Rucksack reorganisation: item priorities of shared items and badges."""

from __future__ import annotations

from typing import Sequence

_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = _LOWER.upper()


def priority(item: str) -> int:
    """Return 1-26 for 'a'-'z' and 27-52 for 'A'-'Z'."""
    if len(item) == 1:
        if item in _LOWER:
            return ord(item) - ord("a") + 1
        if item in _UPPER:
            return ord(item) - ord("A") + 27
    raise ValueError(f"not an item letter: {item!r}")


def common_item(rucksack: str) -> str:
    """Return the item found in both halves, the lowest priority one if several."""
    half = len(rucksack) // 2
    shared = set(rucksack[:half]) & set(rucksack[half:])
    if not shared:
        raise ValueError(f"no item is in both compartments of {rucksack!r}")
    return min(shared, key=priority)


def badge(group: Sequence[str]) -> str:
    """Return the item carried by every rucksack of the group, lowest priority first."""
    if not group:
        raise ValueError("empty group")
    shared = set.intersection(*(set(rucksack) for rucksack in group))
    if not shared:
        raise ValueError("the group shares no item")
    return min(shared, key=priority)


def part_one(text: str) -> int:
    return sum(priority(common_item(rucksack)) for rucksack in text.split())


def part_two(text: str) -> int:
    rucksacks = text.split()
    groups = zip(*[iter(rucksacks)] * 3)
    return sum(priority(badge(group)) for group in groups)