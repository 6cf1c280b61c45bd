"""Supply stacks: a crane moving crates one at a time or several at once."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

_MOVE = re.compile(r"move\s+(\d+)\s+from\s+(\d+)\s+to\s+(\d+)")


@dataclass(frozen=True)
class Move:
    """Move ``count`` crates between zero-based stack indices."""

    count: int
    source: int
    destination: int


@dataclass
class Crane:
    """Stacks of crates, each listed from bottom to top."""

    stacks: list[list[str]] = field(default_factory=list)

    def _stack(self, index: int) -> list[str]:
        if not 0 <= index < len(self.stacks):
            raise ValueError(f"no stack at index {index}")
        return self.stacks[index]

    def apply(self, move: Move, keep_order: bool = False) -> None:
        """Carry out ``move``.

        Crates are lifted one at a time (reversing them) unless ``keep_order``
        is set, in which case they are lifted together.
        """
        source = self._stack(move.source)
        destination = self._stack(move.destination)
        if not 0 <= move.count <= len(source):
            raise ValueError(f"cannot move {move.count} crates from a stack of {len(source)}")
        cut = len(source) - move.count
        moved = source[cut:]
        del source[cut:]
        if not keep_order:
            moved.reverse()
        destination.extend(moved)

    def render(self) -> str:
        """Draw the stacks from the top row down, one ``[c] `` cell per crate."""
        height = max((len(stack) for stack in self.stacks), default=0)
        rows = []
        for level in range(height - 1, -1, -1):
            cells = (
                f"[{stack[level]}] " if level < len(stack) else "    "
                for stack in self.stacks
            )
            rows.append("".join(cells) + "\n")
        return "".join(rows)

    def tops(self) -> str:
        """Return the top crate of every stack, left to right."""
        if any(not stack for stack in self.stacks):
            raise ValueError("a stack is empty")
        return "".join(stack[-1] for stack in self.stacks)


def _parse_moves(lines: Iterable[str]) -> list[Move]:
    moves = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        match = _MOVE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed move: {line!r}")
        count, source, destination = map(int, match.groups())
        moves.append(Move(count, source - 1, destination - 1))
    return moves


def parse_input(text: str) -> tuple[Crane, list[Move]]:
    """Read the crate drawing, its numbering line, and the list of moves."""
    lines = iter(text.splitlines())
    stacks: list[list[str]] = []
    for line in lines:
        if "[" not in line:
            break
        for column in range(0, len(line), 4):
            if line[column] != "[":
                continue
            if column + 1 >= len(line):
                raise ValueError(f"truncated crate in {line!r}")
            index = column // 4
            while len(stacks) <= index:
                stacks.append([])
            stacks[index].append(line[column + 1])
    else:
        raise ValueError("the drawing has no numbering line")
    for stack in stacks:
        stack.reverse()
    return Crane(stacks), _parse_moves(lines)


def _operate(text: str, keep_order: bool) -> str:
    crane, moves = parse_input(text)
    for move in moves:
        crane.apply(move, keep_order)
    return crane.tops()


def part_one(text: str) -> str:
    return _operate(text, False)


def part_two(text: str) -> str:
    return _operate(text, True)