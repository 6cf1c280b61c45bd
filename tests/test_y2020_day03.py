import pytest

from adventkit.y2020_day03 import count_trees, parse_hill, part_one, part_two

EXAMPLE = """..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""


def test_parse_hill():
    hill = parse_hill(EXAMPLE)
    assert hill[0] == "..##......."
    assert len(hill) == len(EXAMPLE.splitlines())


def test_part_one_example():
    assert part_one(EXAMPLE) == 7


def test_part_two_example():
    assert part_two(EXAMPLE) == 336


def test_open_hill_has_no_trees():
    hill = ["....", "....", "...."]
    assert count_trees(hill, 3, 1) == 0


def test_wooded_hill_counts_every_row():
    hill = ["###", "###", "###", "###"]
    assert count_trees(hill, 2, 1) == len(hill)


def test_empty_hill_raises():
    with pytest.raises(ValueError):
        count_trees([], 3, 1)


def test_zero_downward_step_raises():
    with pytest.raises(ValueError):
        count_trees(["#"], 1, 0)