"""Passport processing: required fields and field rules."""

from __future__ import annotations

import re
from typing import Mapping

REQUIRED = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")
EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
_LEADING_NUMBER = re.compile(r"\s*\+?(\d+)(.*)", re.DOTALL)
_HEX = frozenset("0123456789abcdef")
_DIGITS = frozenset("0123456789")


def parse_passports(text: str) -> list[dict[str, str]]:
    """Split blank-line separated blocks into ``key:value`` dictionaries.

    A repeated key keeps its first value.
    """
    passports = []
    tokens: list[str] = []
    for line in text.splitlines() + [""]:
        if line:
            tokens.extend(line.split())
            continue
        if tokens:
            passport: dict[str, str] = {}
            for token in tokens:
                key, colon, value = token.partition(":")
                passport.setdefault(key, value if colon else token)
            passports.append(passport)
            tokens = []
    return passports


def _leading_number(value: str) -> tuple[int, str] | None:
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return None
    return int(match.group(1)), match.group(2)


def year_in_range(value: str, low: int, high: int) -> bool:
    """Tell whether ``value`` starts with a number between ``low`` and ``high``."""
    parsed = _leading_number(value)
    return parsed is not None and low <= parsed[0] <= high


def has_required_fields(passport: Mapping[str, str]) -> bool:
    """Tell whether every required field is present."""
    return all(field in passport for field in REQUIRED)


def _height_ok(value: str) -> bool:
    parsed = _leading_number(value)
    if parsed is None:
        return False
    height, unit = parsed
    if unit == "cm":
        return 150 <= height <= 193
    if unit == "in":
        return 59 <= height <= 76
    return False


def is_valid(passport: Mapping[str, str]) -> bool:
    """Tell whether every required field is present and well formed."""
    if not has_required_fields(passport):
        return False
    if not year_in_range(passport["byr"], 1920, 2002):
        return False
    if not year_in_range(passport["iyr"], 2010, 2020):
        return False
    if not year_in_range(passport["eyr"], 2020, 2030):
        return False
    if not _height_ok(passport["hgt"]):
        return False
    hair = passport["hcl"]
    if len(hair) != 7 or hair[0] != "#" or not set(hair[1:]) <= _HEX:
        return False
    if passport["ecl"] not in EYE_COLOURS:
        return False
    pid = passport["pid"]
    return set(pid) <= _DIGITS and len(pid) == 9


def part_one(text: str) -> int:
    return sum(has_required_fields(p) for p in parse_passports(text))


def part_two(text: str) -> int:
    return sum(is_valid(p) for p in parse_passports(text))