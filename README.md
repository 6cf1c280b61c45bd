# adventkit

Solvers for Advent of Code puzzles from 2018, 2019, 2020, 2021, 2022 and 2024.
No third-party libraries are needed.

Each puzzle lives in its own module named after the year and day, for
example `adventkit.y2020_day01` or `adventkit.y2022_day07`. Every module
takes the raw puzzle input as a string and offers functions that return
the answers, along with the smaller building blocks used to get there.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Puzzles covered

| Year | Days | Parts |
|------|------|-------|
| 2018 | 1, 2, 3 | both |
| 2019 | 1, 2, 3 | one answer each (`solve`) |
| 2020 | 1 to 14 | both |
| 2021 | 1, 2, 3 | both |
| 2022 | 1 and 10 | one answer each (`solve`) |
| 2022 | 2 to 9 | both |
| 2024 | 1, 2 | both |

## Using the library

Days with two parts offer `part_one(text)` and `part_two(text)`; the
single-answer days offer `solve(text)`.

```python
from adventkit.y2020_day01 import part_one

report = "1721\n979\n366\n299\n675\n1456\n"
print(part_one(report))  # 514579
```

The pieces behind an answer are available as well:

```python
from adventkit.y2019_day01 import fuel_for_mass, total_fuel

fuel_for_mass(14)           # fuel for one module, including fuel for the fuel
total_fuel([12, 14, 1969])  # fuel for several modules together
```

```python
from adventkit.y2022_day06 import first_marker

first_marker("mjqjpqmgbljsphdztnvjfqwrcgnjlxhvgrqljnp", 4)
```

Some answers are lists rather than single numbers: for instance
`y2018_day02.part_two` returns every pair of box ids that differ in one
position, `y2020_day05.part_two` every gap seat, and `y2020_day08.part_two`
the accumulator of every repaired program that terminates.
`y2020_day09.part_two(text, target)` takes the number to look for as a
second argument.

Malformed input raises `ValueError`.

Shared helpers live in `adventkit.common`: `Coord2i` for integer grid
coordinates, `l1norm` for their Manhattan length, and `Grid` for a fixed
size two-dimensional table indexed by `(row, column)`.

## Command line

The `adventkit` command runs one solution and prints its answer; list
answers are printed one item per line.

```
adventkit YEAR DAY [PART] [--input FILE]
```

`PART` defaults to 1. The input is read from `FILE` when given; otherwise
from `../../inputs/day<DAY>.in` relative to the current directory when
that file exists, and from standard input when it does not.

```
adventkit 2020 1 2 --input day1.txt
adventkit --help
```

## What it does not do

The package does not fetch puzzle inputs; they must be supplied as files
or on standard input. Only the days and parts listed above are solved: in
particular the 2022 day 10 screen drawing is not produced, only the
signal-strength sum.