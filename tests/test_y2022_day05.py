import pytest

from adventkit.y2022_day05 import Crane, Move, parse_input, part_one, part_two

EXAMPLE = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)


def test_parse_stacks_bottom_first():
    crane, moves = parse_input(EXAMPLE)
    assert crane.stacks == [["Z", "N"], ["M", "C", "D"], ["P"]]
    assert moves[0] == Move(1, 1, 0)
    assert len(moves) == 4


def test_part_one_example():
    assert part_one(EXAMPLE) == "CMZ"


def test_part_two_example():
    assert part_two(EXAMPLE) == "MCD"


def test_single_crate_move_same_in_both_modes():
    a = Crane([["A", "B"], ["C"]])
    b = Crane([["A", "B"], ["C"]])
    a.apply(Move(1, 0, 1), keep_order=False)
    b.apply(Move(1, 0, 1), keep_order=True)
    assert a.stacks == b.stacks == [["A"], ["C", "B"]]


def test_order_differs_between_modes():
    one = Crane([["A", "B", "C"], []])
    many = Crane([["A", "B", "C"], []])
    one.apply(Move(2, 0, 1))
    many.apply(Move(2, 0, 1), keep_order=True)
    assert one.stacks[1] == list(reversed(many.stacks[1]))


def test_crates_are_conserved():
    crane, moves = parse_input(EXAMPLE)
    before = sorted(c for stack in crane.stacks for c in stack)
    for move in moves:
        crane.apply(move)
    assert sorted(c for stack in crane.stacks for c in stack) == before


def test_render_round_trip():
    crane, _ = parse_input(EXAMPLE)
    again, moves = parse_input(crane.render() + " 1   2   3 \n")
    assert again.stacks == crane.stacks
    assert moves == []


def test_too_many_crates_raises():
    crane = Crane([["A"], []])
    with pytest.raises(ValueError):
        crane.apply(Move(2, 0, 1))


def test_bad_stack_index_raises():
    crane = Crane([["A"]])
    with pytest.raises(ValueError):
        crane.apply(Move(1, 0, 5))


def test_tops_of_empty_stack_raises():
    with pytest.raises(ValueError):
        Crane([["A"], []]).tops()


def test_missing_numbering_line_raises():
    with pytest.raises(ValueError):
        parse_input("[A]\n[B]\n")


def test_malformed_move_raises():
    with pytest.raises(ValueError):
        parse_input("[A]\n 1 \n\nshift 1 from 1 to 1\n")