"""Command line entry point: run one puzzle solution on an input file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from adventkit import (
    y2018_day01,
    y2018_day02,
    y2018_day03,
    y2019_day01,
    y2019_day02,
    y2019_day03,
    y2020_day01,
    y2020_day02,
    y2020_day03,
    y2020_day04,
    y2020_day05,
    y2020_day06,
    y2020_day07,
    y2020_day08,
    y2020_day09,
    y2020_day10,
    y2020_day11,
    y2020_day12,
    y2020_day13,
    y2020_day14,
    y2021_day01,
    y2021_day02,
    y2021_day03,
    y2022_day01,
    y2022_day02,
    y2022_day03,
    y2022_day04,
    y2022_day05,
    y2022_day06,
    y2022_day07,
    y2022_day08,
    y2022_day09,
    y2022_day10,
    y2024_day01,
    y2024_day02,
)

INPUT_DIR = Path("..") / ".." / "inputs"

Solver = Callable[[str], object]


def _parts(module) -> dict[int, Solver]:
    return {1: module.part_one, 2: module.part_two}


_PUZZLES: dict[tuple[int, int], dict[int, Solver]] = {
    (2018, 1): _parts(y2018_day01),
    (2018, 2): _parts(y2018_day02),
    (2018, 3): _parts(y2018_day03),
    (2019, 1): {1: y2019_day01.solve},
    (2019, 2): {1: y2019_day02.solve},
    (2019, 3): {1: y2019_day03.solve},
    (2020, 1): _parts(y2020_day01),
    (2020, 2): _parts(y2020_day02),
    (2020, 3): _parts(y2020_day03),
    (2020, 4): _parts(y2020_day04),
    (2020, 5): _parts(y2020_day05),
    (2020, 6): _parts(y2020_day06),
    (2020, 7): _parts(y2020_day07),
    (2020, 8): _parts(y2020_day08),
    (2020, 9): _parts(y2020_day09),
    (2020, 10): _parts(y2020_day10),
    (2020, 11): _parts(y2020_day11),
    (2020, 12): _parts(y2020_day12),
    (2020, 13): _parts(y2020_day13),
    (2020, 14): _parts(y2020_day14),
    (2021, 1): _parts(y2021_day01),
    (2021, 2): _parts(y2021_day02),
    (2021, 3): _parts(y2021_day03),
    (2022, 1): {1: y2022_day01.solve},
    (2022, 2): _parts(y2022_day02),
    (2022, 3): _parts(y2022_day03),
    (2022, 4): _parts(y2022_day04),
    (2022, 5): _parts(y2022_day05),
    (2022, 6): _parts(y2022_day06),
    (2022, 7): _parts(y2022_day07),
    (2022, 8): _parts(y2022_day08),
    (2022, 9): _parts(y2022_day09),
    (2022, 10): {1: y2022_day10.solve},
    (2024, 1): _parts(y2024_day01),
    (2024, 2): _parts(y2024_day02),
}


def read_input(name: str, path: str | Path | None = None) -> str:
    """Return the puzzle input.

    An explicit ``path`` is read; otherwise ``../../inputs/<name>.in`` if it
    exists, and standard input if it does not.
    """
    if path is not None:
        return Path(path).read_text()
    default = INPUT_DIR / f"{name}.in"
    if default.is_file():
        return default.read_text()
    return sys.stdin.read()


def _report(result: object) -> None:
    if isinstance(result, list):
        for item in result:
            print(item)
    else:
        print(result)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="adventkit", description="Run a puzzle solution.")
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, nargs="?", default=1)
    parser.add_argument("--input", dest="path", help="input file (default: ../../inputs/dayN.in or stdin)")
    args = parser.parse_args(argv)

    parts = _PUZZLES.get((args.year, args.day))
    if parts is None:
        parser.error(f"no solution for {args.year} day {args.day}")
    solver = parts.get(args.part)
    if solver is None:
        parser.error(f"no part {args.part} for {args.year} day {args.day}")

    try:
        result = solver(read_input(f"day{args.day}", args.path))
    except (OSError, ValueError) as exc:
        print(f"adventkit: {exc}", file=sys.stderr)
        return 1
    _report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())