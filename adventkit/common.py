"""Integer coordinates and a fixed-size two-dimensional grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Coord2i:
    """An integer point or offset on the plane, ordered by x then y."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Coord2i:
        if not isinstance(other, Coord2i):
            return NotImplemented
        return Coord2i(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Coord2i:
        if not isinstance(other, Coord2i):
            return NotImplemented
        return Coord2i(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def l1norm(coord: Coord2i) -> int:
    """Return the taxicab length of ``coord``."""
    return abs(coord.x) + abs(coord.y)


class Grid(Generic[T]):
    """A rows-by-columns table of cells stored in row-major order."""

    def __init__(self, rows: int, columns: int, fill: T = 0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("grid dimensions must not be negative")
        self.rows = rows
        self.columns = columns
        self._cells: list[T] = [fill] * (rows * columns)

    def _offset(self, index: tuple[int, int]) -> int:
        row, column = index
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"cell {index} is outside a {self.rows}x{self.columns} grid")
        return row * self.columns + column

    def __getitem__(self, index: tuple[int, int]) -> T:
        return self._cells[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: T) -> None:
        self._cells[self._offset(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __str__(self) -> str:
        return "".join(
            "".join(str(cell) for cell in self._cells[start:start + self.columns]) + "\n"
            for start in range(0, len(self._cells), self.columns or 1)
        )