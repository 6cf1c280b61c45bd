import pytest

from adventkit.y2020_day08 import (
    Instruction,
    Machine,
    parse_program,
    part_one,
    part_two,
    repaired_accumulators,
    run_until_repeat,
)

EXAMPLE = """\
nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""


def test_parse_program():
    program = parse_program(EXAMPLE)
    assert len(program) == 9
    assert program[4] == Instruction("jmp", -3)
    assert program[8] == Instruction("acc", 6)


def test_parse_program_requires_arguments():
    with pytest.raises(ValueError):
        parse_program("nop")


def test_part_one_example():
    assert part_one(EXAMPLE) == 5


def test_part_two_example():
    assert part_two(EXAMPLE) == [8]


def test_terminating_program_runs_to_end():
    program = [Instruction("acc", 3), Instruction("acc", 4)]
    machine = Machine(program)
    assert machine.run_until(lambda m: m.execution_counts[m.ip] == 1) is False
    assert machine.ip == len(program)
    assert machine.acc == 3 + 4
    assert machine.execution_counts == [1, 1]


def test_step_acc_and_jmp():
    machine = Machine([Instruction("acc", -2), Instruction("jmp", -1)])
    machine.step()
    assert (machine.ip, machine.acc) == (1, -2)
    machine.step()
    assert (machine.ip, machine.acc) == (0, -2)


def test_step_outside_program_raises():
    machine = Machine([Instruction("jmp", 5), Instruction("nop", 0)])
    machine.step()
    with pytest.raises(IndexError):
        machine.step()


def test_run_until_repeat_on_terminating_program():
    assert run_until_repeat([Instruction("acc", 7)]) == 7


def test_no_repair_for_acc_only_loop_free_program():
    program = [Instruction("acc", 1)]
    assert repaired_accumulators(program) == []