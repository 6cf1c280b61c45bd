"""Handheld console: an accumulator machine and a search for the broken jump."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Sequence


@dataclass(frozen=True)
class Instruction:
    """One ``acc``, ``jmp`` or ``nop`` with its signed argument."""

    opcode: str = "nop"
    arg: int = 0


def parse_program(text: str) -> list[Instruction]:
    """Read pairs of opcode and signed argument."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every instruction needs an argument")
    return [Instruction(op, int(arg)) for op, arg in zip(tokens[::2], tokens[1::2])]


class Machine:
    """Runs a program, counting how often each instruction has executed."""

    def __init__(self, program: Sequence[Instruction]) -> None:
        self.ip = 0
        self.acc = 0
        self.program = list(program)
        self.execution_counts = [0] * len(self.program)

    def step(self) -> None:
        """Execute the instruction at the instruction pointer."""
        if not 0 <= self.ip < len(self.program):
            raise IndexError(f"instruction pointer {self.ip} is outside the program")
        instruction = self.program[self.ip]
        self.execution_counts[self.ip] += 1
        if instruction.opcode == "acc":
            self.acc += instruction.arg
        elif instruction.opcode == "jmp":
            self.ip += instruction.arg
            return
        self.ip += 1

    def run_until(self, predicate: Callable[[Machine], bool]) -> bool:
        """Step until the program ends or ``predicate`` holds; tell whether it held."""
        while self.ip != len(self.program):
            if predicate(self):
                return True
            self.step()
        return False


def _about_to_repeat(machine: Machine) -> bool:
    return machine.execution_counts[machine.ip] == 1


def run_until_repeat(program: Sequence[Instruction]) -> int:
    """Return the accumulator just before any instruction runs a second time."""
    machine = Machine(program)
    machine.run_until(_about_to_repeat)
    return machine.acc


def repaired_accumulators(program: Sequence[Instruction]) -> list[int]:
    """Swap each ``jmp``/``nop`` in turn; return the accumulator of every run that ends."""
    swaps = {"nop": "jmp", "jmp": "nop"}
    results = []
    for index, instruction in enumerate(program):
        if instruction.opcode not in swaps:
            continue
        patched = list(program)
        patched[index] = replace(instruction, opcode=swaps[instruction.opcode])
        machine = Machine(patched)
        try:
            looped = machine.run_until(_about_to_repeat)
        except IndexError:
            continue
        if not looped:
            results.append(machine.acc)
    return results


def part_one(text: str) -> int:
    return run_until_repeat(parse_program(text))


def part_two(text: str) -> list[int]:
    return repaired_accumulators(parse_program(text))