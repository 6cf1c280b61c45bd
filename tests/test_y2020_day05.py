import pytest

from adventkit.y2020_day05 import gap_seats, part_one, part_two, seat_id


def test_seat_id_examples():
    assert seat_id("FBFBBFFRLR") == 357
    assert seat_id("BBFFBBFRLL") == 820


def test_front_left_is_zero():
    assert seat_id("FFFFFFFLLL") == 0


def test_part_one_is_the_largest_id():
    codes = ["FBFBBFFRLR", "BBFFBBFRLL", "FFFBBBFRRR"]
    assert part_one("\n".join(codes)) == max(seat_id(code) for code in codes)


def test_part_one_without_passes_raises():
    with pytest.raises(ValueError):
        part_one("")


def test_gap_seats_are_missing_between_neighbours():
    taken = [3, 5, 6, 8, 9, 10]
    gaps = gap_seats(taken)
    assert gaps
    for gap in gaps:
        assert gap not in taken
        assert gap - 1 in taken and gap + 1 in taken


def test_consecutive_seats_have_no_gaps():
    assert gap_seats(range(10, 20)) == []


def test_part_two_finds_removed_seat():
    codes = ["FBFBBFFRLL", "FBFBBFFRRL"]
    found = part_two("\n".join(codes))
    assert found == [seat_id("FBFBBFFRLR")]