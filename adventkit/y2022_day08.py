"""Treetop tree house: trees visible from outside and the best scenic spot."""

from __future__ import annotations

from enum import IntFlag
from typing import Sequence

from adventkit.common import Grid

_DIGITS = frozenset("0123456789")
_DIRECTIONS = ((-1, 0), (0, -1), (0, 1), (1, 0))


class Visibility(IntFlag):
    """The edges of the forest from which a tree can be seen."""

    LEFT = 0x01
    TOP = 0x02
    RIGHT = 0x04
    BOTTOM = 0x08


def parse_forest(text: str) -> list[list[int]]:
    """Read rows of single-digit tree heights."""
    rows = []
    for line in text.split():
        if not set(line) <= _DIGITS:
            raise ValueError(f"not a row of digits: {line!r}")
        rows.append([int(ch) for ch in line])
    return rows


class Forest:
    """A grid of tree heights with the directions each tree is seen from."""

    def __init__(self, heights: Sequence[Sequence[int]]) -> None:
        table = [list(row) for row in heights]
        if not table or not table[0]:
            raise ValueError("the forest is empty")
        columns = len(table[0])
        if any(len(row) != columns for row in table):
            raise ValueError("every row of the forest must have the same length")
        self.rows = len(table)
        self.columns = columns
        self.heights: Grid[int] = Grid(self.rows, columns, 0)
        self._visible: Grid[Visibility] = Grid(self.rows, columns, Visibility(0))
        for r, row in enumerate(table):
            for c, height in enumerate(row):
                self.heights[r, c] = height
        self._mark(range(self.rows), range(columns), Visibility.LEFT, Visibility.TOP)
        self._mark(
            range(self.rows - 1, -1, -1),
            range(columns - 1, -1, -1),
            Visibility.RIGHT,
            Visibility.BOTTOM,
        )

    def _mark(
        self, row_order: range, column_order: range, across: Visibility, down: Visibility
    ) -> None:
        tallest_in_column = [-1] * self.columns
        for r in row_order:
            tallest_in_row = -1
            for c in column_order:
                height = self.heights[r, c]
                if height > tallest_in_row:
                    tallest_in_row = height
                    self._visible[r, c] |= across
                if height > tallest_in_column[c]:
                    tallest_in_column[c] = height
                    self._visible[r, c] |= down

    def visibility(self, row: int, column: int) -> Visibility:
        """Return the edges from which the tree at ``(row, column)`` is seen."""
        return self._visible[row, column]

    def visible_count(self) -> int:
        """Count the trees seen from at least one edge."""
        return sum(1 for flags in self._visible if flags)

    def scenic_score(self, row: int, column: int) -> int:
        """Multiply the viewing distances from ``(row, column)`` in the four directions."""
        own = self.heights[row, column]
        score = 1
        for dr, dc in _DIRECTIONS:
            distance = 0
            r, c = row + dr, column + dc
            while 0 <= r < self.rows and 0 <= c < self.columns:
                distance += 1
                if self.heights[r, c] >= own:
                    break
                r, c = r + dr, c + dc
            score *= distance
        return score

    def best_spot(self) -> tuple[int, int, int]:
        """Return (row, column, score) of the first tree with the highest scenic score."""
        best = (0, 0, self.scenic_score(0, 0))
        for r in range(self.rows):
            for c in range(self.columns):
                score = self.scenic_score(r, c)
                if score > best[2]:
                    best = (r, c, score)
        return best

    def __str__(self) -> str:
        return str(self.heights)


def part_one(text: str) -> int:
    return Forest(parse_forest(text)).visible_count()


def part_two(text: str) -> int:
    return Forest(parse_forest(text)).best_spot()[2]