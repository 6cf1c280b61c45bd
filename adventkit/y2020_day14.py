"""Docking data: bitmask programs acting on values or on addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Union

REGISTER_MASK = (1 << 36) - 1

_WRITE = re.compile(r"mem\[(\d+)\]\s*=\s*(\d+)")
_MASK = re.compile(r"mask\s*=\s*(\S+)")


@dataclass(frozen=True)
class MaskCommand:
    """A mask: the bits marked 'X' and the bits forced to 1."""

    floating: int
    ones: int

    @classmethod
    def from_pattern(cls, pattern: str) -> MaskCommand:
        floating = ones = 0
        for bit, ch in enumerate(reversed(pattern)):
            if ch == "X":
                floating |= 1 << bit
            elif ch == "1":
                ones |= 1 << bit
        return cls(floating, ones)


@dataclass(frozen=True)
class WriteCommand:
    """A write of ``value`` to memory ``address``."""

    address: int
    value: int


Command = Union[MaskCommand, WriteCommand]


def parse_program(text: str) -> list[Command]:
    """Read ``mask = ...`` and ``mem[N] = V`` lines."""
    program: list[Command] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if match := _WRITE.fullmatch(line):
            program.append(WriteCommand(int(match.group(1)), int(match.group(2))))
        elif match := _MASK.fullmatch(line):
            program.append(MaskCommand.from_pattern(match.group(1)))
        else:
            raise ValueError(f"malformed command: {line!r}")
    return program


def deposit_bits(value: int, mask: int) -> int:
    """Scatter the low bits of ``value`` into the set bits of ``mask``, lowest first."""
    if mask < 0 or value < 0:
        raise ValueError("value and mask must not be negative")
    result = 0
    source_bit = 1
    remaining = mask
    while remaining:
        lowest = remaining & -remaining
        if value & source_bit:
            result |= lowest
        source_bit <<= 1
        remaining ^= lowest
    return result


def _check(command: object) -> None:
    if not isinstance(command, (MaskCommand, WriteCommand)):
        raise TypeError(f"not a command: {command!r}")


@dataclass
class ValueMaskMachine:
    """Applies the mask to each value written."""

    keep: int = 0
    ones: int = 0
    memory: dict[int, int] = field(default_factory=dict)

    def execute(self, command: Command) -> None:
        _check(command)
        if isinstance(command, MaskCommand):
            self.keep, self.ones = command.floating, command.ones
        else:
            masked = (command.value & self.keep) | self.ones
            self.memory[command.address & REGISTER_MASK] = masked & REGISTER_MASK

    def run(self, program: Iterable[Command]) -> None:
        for command in program:
            self.execute(command)

    def memory_sum(self) -> int:
        return sum(self.memory.values())


@dataclass
class AddressMaskMachine:
    """Applies the mask to each address, writing to every floating combination."""

    floating: int = 0
    ones: int = 0
    memory: dict[int, int] = field(default_factory=dict)

    def execute(self, command: Command) -> None:
        _check(command)
        if isinstance(command, MaskCommand):
            self.floating, self.ones = command.floating, command.ones
            return
        keep = ~(self.floating | self.ones) & REGISTER_MASK
        base = command.address & keep
        value = command.value & REGISTER_MASK
        for combination in range(1 << bin(self.floating).count("1")):
            address = (base | deposit_bits(combination, self.floating) | self.ones) & REGISTER_MASK
            self.memory[address] = value

    def run(self, program: Iterable[Command]) -> None:
        for command in program:
            self.execute(command)

    def memory_sum(self) -> int:
        return sum(self.memory.values())


def part_one(text: str) -> int:
    machine = ValueMaskMachine()
    machine.run(parse_program(text))
    return machine.memory_sum()


def part_two(text: str) -> int:
    machine = AddressMaskMachine()
    machine.run(parse_program(text))
    return machine.memory_sum()