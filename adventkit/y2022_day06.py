"""Tuning trouble: finding the first run of distinct characters in a stream."""

from __future__ import annotations


def first_marker(stream: str, size: int) -> int:
    """Return how many characters are read when the last ``size`` are all distinct.

    Whitespace is skipped. A run completed by the ``size``-th character itself
    is not reported; the search starts one character later.
    """
    if size < 1:
        raise ValueError("the marker size must be positive")
    chars = [ch for ch in stream if not ch.isspace()]
    for end in range(size, len(chars)):
        if len(set(chars[end - size + 1:end + 1])) == size:
            return end + 1
    raise ValueError(f"no run of {size} distinct characters")


def part_one(text: str) -> int:
    return first_marker(text, 4)


def part_two(text: str) -> int:
    return first_marker(text, 14)