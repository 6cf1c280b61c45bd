import pytest

from adventkit.y2022_day06 import first_marker, part_one, part_two

SAMPLE = "mjqjpqmgbljsphdztgvjfqwmcfpqt"


def test_part_one_sample():
    assert part_one(SAMPLE) == 7


@pytest.mark.parametrize("size", [4, 14])
def test_window_is_distinct_and_first(size):
    text = "bvwbjplbgvbhsrlpgdmjqwftvncz" + "nppdvjthqldpwncqszvftbrmjlhg"
    end = first_marker(text, size)
    assert len(set(text[end - size:end])) == size
    for earlier in range(size + 1, end):
        assert len(set(text[earlier - size:earlier])) < size


def test_whitespace_is_skipped():
    spaced = " ".join(SAMPLE[:10]) + "\n" + SAMPLE[10:]
    assert first_marker(spaced, 4) == first_marker(SAMPLE, 4)


def test_marker_at_very_start_is_passed_over():
    result = first_marker("abcdefgh", 4)
    assert result > 4
    assert len(set("abcdefgh"[result - 4:result])) == 4


def test_no_marker_raises():
    with pytest.raises(ValueError):
        first_marker("aaaaaaaaaaaa", 4)


def test_bad_size_raises():
    with pytest.raises(ValueError):
        first_marker(SAMPLE, 0)