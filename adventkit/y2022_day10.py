"""Cathode-ray tube: a two-instruction CPU and its signal strength."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import count
from typing import Iterable

_OPCODES = ("noop", "addx")


@dataclass(frozen=True)
class Command:
    """An instruction with its argument (zero for ``noop``)."""

    opcode: str
    argument: int = 0

    def __str__(self) -> str:
        return f"{self.opcode}_{self.argument}"


def parse_program(text: str) -> list[Command]:
    """Read ``noop`` and ``addx N`` instructions."""
    tokens = iter(text.split())
    program = []
    for opcode in tokens:
        if opcode == "noop":
            program.append(Command(opcode))
        elif opcode == "addx":
            argument = next(tokens, None)
            if argument is None:
                raise ValueError("addx needs an argument")
            program.append(Command(opcode, int(argument)))
        else:
            raise ValueError(f"unknown instruction: {opcode!r}")
    return program


class Device:
    """Runs a program one clock cycle at a time; ``addx`` takes two cycles."""

    def __init__(self, program: Iterable[Command]) -> None:
        self._pending = deque(program)
        self._waited = 0
        self.timestamp = 0
        self.x = 1

    @property
    def value(self) -> int:
        """The X register."""
        return self.x

    @property
    def clock(self) -> int:
        """The index of the last cycle ticked."""
        return self.timestamp - 1

    def _execute(self, command: Command) -> bool:
        if command.opcode == "noop":
            return True
        if command.opcode == "addx":
            if self._waited == 1:
                self.x += command.argument
                return True
            return False
        raise ValueError(f"unknown instruction: {command.opcode!r}")

    def tick(self) -> bool:
        """Advance one cycle; return whether instructions remain."""
        self.timestamp += 1
        if not self._pending:
            return False
        if self._execute(self._pending[0]):
            self._pending.popleft()
            self._waited = 0
        else:
            self._waited += 1
        return bool(self._pending)


def signal_strength_sum(program: Iterable[Command]) -> int:
    """Sum X times the cycle number during cycles 20, 60, 100 and so on."""
    device = Device(program)
    total = 0
    for cycle in count():
        if not device.tick():
            break
        if cycle % 40 == 18:
            # The register now holds the value seen during cycle ``cycle + 2``.
            total += device.value * (cycle + 2)
    return total


def solve(text: str) -> int:
    return signal_strength_sum(parse_program(text))