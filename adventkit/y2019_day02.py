"""A small add/multiply machine and a search for its inputs."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

TARGET = 19690720


class Opcode(IntEnum):
    ADD = 1
    MUL = 2
    END = 99


def parse_program(text: str) -> list[int]:
    """Read a comma-separated list of integers."""
    return [int(token) for token in text.replace(",", " ").split()]


def _check(memory: list[int], address: int) -> int:
    if not 0 <= address < len(memory):
        raise IndexError(f"address {address} is outside memory")
    return address


def run(memory: Sequence[int], noun: int, verb: int) -> int:
    """Run a copy of ``memory`` with ``noun`` and ``verb`` placed; return cell 0."""
    data = list(memory)
    if not data:
        raise ValueError("empty program")
    data += [0] * (-len(data) % 4)
    data[1] = noun
    data[2] = verb
    for pc in range(0, len(data), 4):
        op, first, second, target = data[pc:pc + 4]
        if op == Opcode.END:
            break
        if op == Opcode.ADD:
            value = data[_check(data, first)] + data[_check(data, second)]
        elif op == Opcode.MUL:
            value = data[_check(data, first)] * data[_check(data, second)]
        else:
            raise ValueError(f"Unrecognized opcode: {op}")
        data[_check(data, target)] = value
    return data[0]


def find_noun_verb(memory: Sequence[int], target: int = TARGET) -> list[tuple[int, int]]:
    """Return every (noun, verb) with noun < 1000, verb < 100 producing ``target``."""
    matches = []
    for noun in range(1000):
        for verb in range(100):
            try:
                result = run(memory, noun, verb)
            except (IndexError, ValueError):
                continue
            if result == target:
                matches.append((noun, verb))
    return matches


def solve(text: str) -> list[tuple[int, int]]:
    return find_noun_verb(parse_program(text), TARGET)