# aocsolver

Solutions to a selection of Advent of Code puzzles from 2018, 2019, 2020,
2022, 2023 and 2024, written as small, self-contained Python modules. Each
puzzle lives in its own module under a package named after its year, for
example `aocsolver.y2022.day01` or `aocsolver.y2018.day14`.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The `aocsolver` command takes a year and a day, reads the puzzle input from
standard input and prints the answer to part one followed by the answer to
part two, one per line:

```
aocsolver 2022 1 < input.txt
```

The command covers 2022 days 1 to 4. Any other year/day combination is
reported on standard error as `error: Not solved yet: ...` and the command
returns exit status 1. The same dispatch is available from Python as
`aocsolver.cli.solve(year, day, text)`, which returns the pair of answers or
raises `ValueError`.

## Library use

### Text in, answer out

These modules expose `solve_part_1(text)` and `solve_part_2(text)`, taking the
raw puzzle text:

- `aocsolver.y2022.day01` to `day04`
- `aocsolver.y2023.day01`
- `aocsolver.y2020.day02` to `day06`
- `aocsolver.y2024.day03` to `day06`

```python
from aocsolver.y2022 import day01

text = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
print(day01.solve_part_1(text))  # 24000
print(day01.solve_part_2(text))  # 45000
```

`aocsolver.y2020.day01` also takes the target sum and returns `None` when no
entries add up to it:

```python
from aocsolver.y2020 import day01 as expenses
expenses.solve_part_1(report_text, 2020)
expenses.solve_part_2(report_text, 2020)
```

The 2024 puzzles for days 1 and 2 separate parsing from solving:

```python
from aocsolver.y2024 import day02
reports = day02.parse(text)
day02.solve_part_1(reports)
day02.solve_part_2(reports)
```

For the 2019 wire puzzle, `aocsolver.y2019.day03.solve(text)` returns both
answers as a pair: the Manhattan distance of the closest crossing and the
smallest combined wire length to a crossing.

### 2018 puzzles

The 2018 modules model each puzzle with a small class:

| Module | Entry points |
| --- | --- |
| `day01` | `Device.from_text(text)` / `Device.from_file(path)`, then `resulting_frequency()` and `first_repeated()` |
| `day02` | `Warehouse.from_text(text)` / `Warehouse.from_file(path)`, then `checksum()` and `common_letters()` |
| `day03` | `Fabric(parse_claims(text))`, then `overlap_size(2)` and `non_overlapping_claim()` |
| `day05` | `Polymer(text)`, then `trigger()` (the reacted polymer) and `trigger_v2()` |
| `day06` | `Grid(parse(text))`, then `biggest_finite_area()` and `safe_region_size(distance)` |
| `day07` | `Process(*parse(text))`, then `ordering()` and `completion_time(n_workers, step_time)` |
| `day08` | `Node.from_data(parse(text))`, then `metadata_sum()` and `value()` |
| `day09` | `MarbleGame(n_players, n_marbles)`, then `simulate()` and `high_score()` |
| `day10` | `parse(text)` gives a `Sky`; `tick_until_smallest_area()` then `render()` |
| `day11` | `Grid(serial_number, 300)`, then `square_with_largest_power(3)` and `largest_power()` |
| `day12` | `parse(text)` gives `Pots`; `simulate(generations)` then `value()` |
| `day14` | `Kitchen()`, then `scores_after(n)` and `left_of_sequence(sequence)` |

```python
from aocsolver.y2018.day09 import MarbleGame
game = MarbleGame(10, 1618)
game.simulate()
game.high_score()  # 8317

from aocsolver.y2018.day14 import Kitchen
Kitchen().scores_after(9)                     # "5158916779"
Kitchen([0, 1], [3, 7]).left_of_sequence([5, 1, 5, 8, 9])  # 9
```

`completion_time` takes a function giving the seconds each step needs, for
example `lambda step: ord(step) - 4`.

## What it does not do

Only the 2022 puzzles are reachable from the `aocsolver` command; every other
puzzle is used from Python as shown above. The package ships no puzzle inputs:
you supply your own text.