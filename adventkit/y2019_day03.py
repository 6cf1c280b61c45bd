"""Crossed wires: intersections ranked by distance from the origin."""

from __future__ import annotations

import re

Point = tuple[int, int]

_DIRECTIONS: dict[str, Point] = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def manhattan(point: Point) -> int:
    """Return the taxicab distance of ``point`` from the origin."""
    return abs(point[0]) + abs(point[1])


def trace_wire(line: str) -> dict[Point, int]:
    """Map each point a wire passes to the step count of its first visit."""
    visits: dict[Point, int] = {}
    x = y = steps = 0
    for token in re.split(r"[^0-9A-Za-z]+", line):
        if not token:
            continue
        try:
            dx, dy = _DIRECTIONS[token[0]]
        except KeyError:
            raise ValueError(f"unknown direction in {token!r}") from None
        for _ in range(int(token[1:])):
            x += dx
            y += dy
            steps += 1
            visits.setdefault((x, y), steps)
    return visits


def intersections(
    wire_a: dict[Point, int], wire_b: dict[Point, int]
) -> list[tuple[Point, int, int]]:
    """Return (point, distance, combined steps) for crossings, nearest first.

    Only one crossing is kept per distance: the lowest point in (x, y) order.
    """
    by_distance: dict[int, Point] = {}
    for point in sorted(wire_a.keys() & wire_b.keys()):
        by_distance.setdefault(manhattan(point), point)
    return [
        (point, distance, wire_a[point] + wire_b[point])
        for distance, point in sorted(by_distance.items())
    ]


def solve(text: str) -> list[tuple[Point, int, int]]:
    first, second = (text.splitlines() + ["", ""])[:2]
    return intersections(trace_wire(first), trace_wire(second))