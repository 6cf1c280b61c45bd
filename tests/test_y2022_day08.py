import pytest

from adventkit.y2022_day08 import Forest, Visibility, parse_forest, part_one, part_two

EXAMPLE = "30373\n25512\n65332\n33549\n35390\n"


@pytest.fixture
def forest():
    return Forest(parse_forest(EXAMPLE))


def test_parse_reads_digits():
    assert parse_forest("12\n34\n") == [[1, 2], [3, 4]]


def test_example_visible_count():
    assert part_one(EXAMPLE) == 21


def test_example_best_spot(forest):
    assert forest.best_spot() == (3, 2, 8)
    assert part_two(EXAMPLE) == forest.best_spot()[2]


def test_top_row_seen_from_top(forest):
    for column in range(forest.columns):
        assert (forest.visibility(0, column) & Visibility.TOP) == Visibility.TOP


def test_left_column_seen_from_left(forest):
    for row in range(forest.rows):
        assert (forest.visibility(row, 0) & Visibility.LEFT) == Visibility.LEFT


def test_hidden_tree_has_no_flags(forest):
    assert forest.visibility(1, 3) == Visibility(0)


def test_edge_trees_score_zero(forest):
    for column in range(forest.columns):
        assert forest.scenic_score(0, column) == 0
        assert forest.scenic_score(forest.rows - 1, column) == 0


def test_single_row_is_all_visible():
    row = [5, 5, 5, 5]
    assert Forest([row]).visible_count() == len(row)


def test_visible_count_never_exceeds_size(forest):
    assert forest.visible_count() <= forest.rows * forest.columns


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Forest([[1, 2], [3]])


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        parse_forest("12a\n")


def test_empty_forest_rejected():
    with pytest.raises(ValueError):
        part_one("")


def test_score_outside_raises(forest):
    with pytest.raises(IndexError):
        forest.scenic_score(forest.rows, 0)