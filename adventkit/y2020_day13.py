"""Shuttle buses: the next departure and the earliest aligned timestamp."""

from __future__ import annotations

from math import prod
from typing import Iterable, Mapping


def parse_schedule(text: str) -> tuple[int, dict[int, int]]:
    """Read a timestamp and a comma-separated bus line.

    Returns the timestamp and a map from each bus id to its offset in the
    line; ``x`` entries are skipped but still advance the offset.
    """
    parts = text.split(maxsplit=1)
    if len(parts) < 2:
        raise ValueError("expected a timestamp followed by a bus list")
    timestamp = int(parts[0])
    line = parts[1].splitlines()[0]
    buses: dict[int, int] = {}
    for offset, item in enumerate(line.split(",")):
        item = item.strip()
        if item == "x":
            continue
        bus = int(item)
        if bus <= 0:
            raise ValueError(f"bus ids must be positive, got {bus}")
        buses[bus] = offset
    return timestamp, buses


def next_bus_product(timestamp: int, buses: Iterable[int]) -> int:
    """Return the id of the first bus to leave at or after ``timestamp`` times the wait."""
    ids = list(buses)
    if not ids:
        raise ValueError("no buses in service")
    best = min(ids, key=lambda bus: -timestamp % bus)
    return best * (-timestamp % best)


def mod_inverse(a: int, n: int) -> int:
    """Return the inverse of ``a`` modulo ``n``; raise if there is none."""
    if n <= 0:
        raise ValueError("the modulus must be positive")
    t, new_t = 0, 1
    r, new_r = n, a % n
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r > 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    if t < 0:
        t += n
    return t


def earliest_aligned_timestamp(buses: Mapping[int, int]) -> int:
    """Return the smallest t with each bus leaving ``offset`` minutes after t.

    Solved with the Chinese remainder theorem; the bus ids must be pairwise coprime.
    """
    modulus = prod(buses)
    total = 0
    for bus, offset in buses.items():
        partial = modulus // bus
        total += (-offset % bus) * mod_inverse(partial, bus) * partial
    return total % modulus


def part_one(text: str) -> int:
    timestamp, buses = parse_schedule(text)
    return next_bus_product(timestamp, buses)


def part_two(text: str) -> int:
    _, buses = parse_schedule(text)
    return earliest_aligned_timestamp(buses)