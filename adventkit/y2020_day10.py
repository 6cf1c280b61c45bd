"""Joltage adapters: chain differences and the number of arrangements."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise
from typing import Iterable


def parse_adapters(text: str) -> list[int]:
    """Read whitespace-separated adapter ratings."""
    return [int(token) for token in text.split()]


def _chain(adapters: Iterable[int]) -> list[int]:
    chain = sorted(adapters)
    if not chain:
        raise ValueError("no adapters")
    chain.append(chain[-1] + 3)
    return chain


def difference_counts(adapters: Iterable[int]) -> dict[int, int]:
    """Count the joltage steps along the sorted chain, from the outlet to the device."""
    chain = _chain(adapters)
    steps = [chain[0]] + [later - earlier for earlier, later in pairwise(chain)]
    return dict(Counter(steps))


def arrangement_counts(adapters: Iterable[int]) -> dict[int, int]:
    """Map each joltage in the chain to the number of ways to reach it from the outlet."""
    chain = _chain(adapters)
    if chain[0] < 0:
        raise ValueError("ratings must not be negative")
    ways = [0] * (chain[-1] + 1)
    ways[0] = 1
    result: dict[int, int] = {}
    for joltage in chain:
        ways[joltage] += sum(ways[max(0, joltage - 3):joltage])
        result[joltage] = ways[joltage]
    return result


def part_one(text: str) -> dict[int, int]:
    return difference_counts(parse_adapters(text))


def part_two(text: str) -> int:
    counts = arrangement_counts(parse_adapters(text))
    return counts[max(counts)]