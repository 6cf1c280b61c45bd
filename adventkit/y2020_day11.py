"""Seating system: a cellular automaton run until it settles."""

from __future__ import annotations

from typing import Sequence

_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class SeatingArea:
    """A grid of floor '.', empty seats 'L' and occupied seats '#'."""

    def __init__(self, rows: Sequence[str], line_of_sight: bool = False, tolerance: int = 4) -> None:
        if not rows:
            raise ValueError("the seating area is empty")
        self.rows = list(rows)
        self.line_of_sight = line_of_sight
        self.tolerance = tolerance

    def _inside(self, row: int, column: int) -> bool:
        return 0 <= row < len(self.rows) and 0 <= column < len(self.rows[0])

    def occupied_near(self, row: int, column: int) -> int:
        """Count occupied seats adjacent to, or first seen from, the given cell."""
        count = 0
        for dr, dc in _OFFSETS:
            r, c = row + dr, column + dc
            while self._inside(r, c):
                cell = self.rows[r][c]
                if cell == "#":
                    count += 1
                    break
                if cell == "L" or not self.line_of_sight:
                    break
                r, c = r + dr, c + dc
        return count

    def step(self) -> bool:
        """Apply one round; return True when nothing changed."""
        steady = True
        new_rows = []
        for r, line in enumerate(self.rows):
            cells = list(line)
            for c, cell in enumerate(line):
                near = self.occupied_near(r, c)
                if cell == "L" and near == 0:
                    cells[c] = "#"
                    steady = False
                elif cell == "#" and near >= self.tolerance:
                    cells[c] = "L"
                    steady = False
            new_rows.append("".join(cells))
        self.rows = new_rows
        return steady

    def occupied(self) -> int:
        """Count occupied seats."""
        return sum(line.count("#") for line in self.rows)

    def settle(self) -> int:
        """Run rounds until steady; return how many rounds changed something."""
        rounds = 0
        while not self.step():
            rounds += 1
        return rounds

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.rows)


def part_one(text: str) -> int:
    area = SeatingArea(text.split(), line_of_sight=False, tolerance=4)
    area.settle()
    return area.occupied()


def part_two(text: str) -> int:
    area = SeatingArea(text.split(), line_of_sight=True, tolerance=5)
    area.settle()
    return area.occupied()