# advent2024

This is a small Python library with no dependencies. It solves the first twenty
puzzles of the 2024 advent calendar.

Each day has its own module, from `advent2024.day01` to `advent2024.day20`.
Every module has the same entry points:

- `parse_input(text)` turns the raw puzzle input into Python data. It raises
  `ValueError` when the text does not match the expected format.
- `part1(text)` and `part2(text)` take the raw puzzle input as a string and
  return the answer for that part.

## Usage

```python
from pathlib import Path

from advent2024 import day01, day11

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))

print(day11.stone_tick(1234))   # (12, 34)
```

Many modules also expose the building blocks that the two parts use, so you
can call and test them on their own. Some examples:

- `day07.search_for_sum(total, numbers, with_concat)`
- `day13.solve_problem(problem)`
- `day17.Cpu`, with its `step()` and `run()` methods
- `day19.PatternTrie`, with `insert()` and `options_count()`
- `day18.Grid` and `day18.first_blocking_byte`, which take any grid size

Inputs must use the exact format the puzzles give them:

- Lines are separated by `\n`.
- Blank lines separate sections where the puzzle has them.

Some parts use the sizes fixed by the real puzzle:

- Day 14 uses a 101 by 103 grid and 100 seconds.
- Day 18 uses a 71 by 71 grid with the first 1024 bytes fallen.
- Day 20 counts cheats that save at least 100 picoseconds.

For other sizes, call the lower-level functions directly.

## What it does not do

This is a library only:

- It has no command-line program.
- It does not download puzzle inputs.
- It does not time or benchmark solutions.

You read the input yourself and pass the text to `part1` or `part2`.

## Tests

The test suite uses pytest and lives in the `tests/` directory. Install the
`test` extra to get pytest.