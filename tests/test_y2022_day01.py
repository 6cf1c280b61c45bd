import pytest

from adventkit.y2022_day01 import elf_totals, parse_elves, solve, top_total

EXAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"


def test_parse_elves_groups_lines():
    assert parse_elves("1\n2\n\n3\n") == [[1, 2], [3]]


def test_parse_elves_ignores_extra_blank_lines():
    assert parse_elves("\n\n5\n\n\n\n6\n\n") == [[5], [6]]


def test_totals_preserve_sum():
    elves = parse_elves(EXAMPLE)
    totals = elf_totals(elves)
    assert len(totals) == len(elves)
    assert sum(totals) == sum(int(token) for token in EXAMPLE.split())


def test_top_one_is_maximum():
    totals = elf_totals(parse_elves(EXAMPLE))
    assert top_total(totals, 1) == max(totals)


def test_top_all_is_sum():
    totals = elf_totals(parse_elves(EXAMPLE))
    assert top_total(totals, len(totals)) == sum(totals)


def test_top_total_grows_with_count():
    totals = elf_totals(parse_elves(EXAMPLE))
    values = [top_total(totals, n) for n in range(len(totals) + 1)]
    assert values == sorted(values)


def test_solve_example_top_three():
    assert solve(EXAMPLE, 3) == 45000


def test_solve_default_needs_six_elves():
    with pytest.raises(ValueError):
        solve(EXAMPLE)


def test_top_total_rejects_negative():
    with pytest.raises(ValueError):
        top_total([1, 2], -1)