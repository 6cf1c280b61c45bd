"""Binary diagnostic: power rates and life-support ratings."""

from __future__ import annotations

from typing import Iterable, Sequence


def parse_report(text: str) -> list[str]:
    """Read whitespace-separated binary strings."""
    return text.split()


def _value(line: str) -> int:
    """Read a binary string; every character other than '1' counts as 0."""
    return int("".join("1" if ch == "1" else "0" for ch in line) or "0", 2)


def power_rates(lines: Iterable[str]) -> tuple[int, int]:
    """Return (gamma, epsilon): the most and least common bit at each position.

    Positions are counted from the right, so shorter lines are right-aligned.
    """
    lines = list(lines)
    if not lines:
        raise ValueError("the report is empty")
    width = max(len(line) for line in lines)
    gamma = 0
    for bit in range(width):
        ones = sum(1 for line in lines if bit < len(line) and line[-1 - bit] == "1")
        if 2 * ones > len(lines):
            gamma |= 1 << bit
    epsilon = ~gamma & ((1 << width) - 1)
    return gamma, epsilon


def filter_rating(lines: Sequence[str], most: bool) -> int:
    """Narrow the lines bit by bit from the left until one remains.

    With ``most`` the lines holding the most common bit (ties to 1) are kept,
    otherwise those holding the least common bit (ties to 0).
    """
    candidates = list(lines)
    if not candidates:
        raise ValueError("the report is empty")
    position = 0
    while len(candidates) != 1:
        if any(position >= len(line) for line in candidates):
            raise ValueError("the lines cannot be narrowed to a single rating")
        ones = sum(line[position] == "1" for line in candidates)
        common = (2 * ones >= len(candidates)) == most
        candidates = [line for line in candidates if (line[position] == "1") == common]
        if not candidates:
            raise ValueError("no line is left to give a rating")
        position += 1
    return _value(candidates[0])


def part_one(text: str) -> int:
    gamma, epsilon = power_rates(parse_report(text))
    return gamma * epsilon


def part_two(text: str) -> int:
    lines = parse_report(text)
    return filter_rating(lines, True) * filter_rating(lines, False)