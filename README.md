# judgeset

Solutions to classic online-judge problems, written as ordinary Python
functions that take values and return results. Every module also has a
`run(problem, text)` function that reads a problem's judge input from a
string and returns the judge's expected output as a string.

The package has no dependencies beyond the standard library.

## Modules

- `judgeset.arithmetic` — small numeric problems:
  `return_displacement`, `crossing_time_difference`, `bafana_pass`,
  `combination_lock_degrees`, `feynman_squares`, `hashmat_difference`,
  `numbering_road`, `compare`, `nessy_sonars`, `three_families_share`,
  `add_without_carry`, `digit_root`, `cycle_length` and
  `max_cycle_length` (the 3n+1 problem).
- `judgeset.textual` — word and line problems: `hajj_name`,
  `detect_language`, `spell_number`, `tex_quotes`, `bender_direction`,
  `newspaper_cost` with `format_dollars`, `split_string`, `parse_time`,
  `average_speed` (a generator over log lines) and `horror_dash`.
- `judgeset.sequences` — problems over short lists of numbers:
  `brick_game`, `cost_cutting`, `nlogonia_region`, `emoogle_balance`,
  `jumping_mario`, `packing_ok`, `save_setu` (a generator of running
  totals) and `event_planning`.
- `judgeset.simulation` — step-by-step simulations: `loan_months` with
  `format_months`, `snail`, and `best_proposal` over `Proposal` records
  (name, price, requirements met).
- `judgeset.puzzles` — search puzzles: `eight_queens` with one queen
  fixed and `format_queens` to print the table, `ecological_bin_packing`,
  `quirksome_squares` (computed), `quirksome_table` (precomputed for 2, 4,
  6 and 8 digits), `is_quirksome`, and seat counting under social
  constraints with `social_constraints_bfs` and `social_constraints_dfs`.
- `judgeset.optimisation` — subset and selection problems:
  `bars_memoized` (a search memoised on the remaining length alone),
  `bars_tabulated` (exact subset sum), `graph_coloring` (the largest set of
  nodes with no edge between them, in the order the search found it) and
  `water_gate_cost` (cheapest set of gates, or `None`).

Functions that can have no answer return `None` (for example
`numbering_road`, `water_gate_cost`, `event_planning`), and invalid
arguments raise `ValueError`.

## Using the functions

```python
from judgeset.arithmetic import cycle_length, max_cycle_length, digit_root

cycle_length(22)          # 16
max_cycle_length(1, 10)   # 20
digit_root(12345)         # 6
```

```python
from judgeset.optimisation import bars_tabulated

bars_tabulated(25, [10, 12, 5, 7, 13])   # True: 12 + 13 == 25
```

## Running a problem over judge input

```python
from judgeset import arithmetic

arithmetic.run("relational", "3\n10 20\n20 10\n10 10\n")   # "<\n>\n=\n"
```

The problem names each module's `run` accepts:

| Module | Problems |
| --- | --- |
| `arithmetic` | `physics`, `intermediate`, `bafana`, `lock`, `feynman`, `hashmat`, `road`, `relational`, `nessy`, `families`, `carry`, `digits`, `3n+1` |
| `textual` | `jeopardy`, `hajj`, `language`, `onetwothree`, `texquotes`, `bender`, `newspaper`, `speed`, `horror` |
| `sequences` | `brick`, `costcutting`, `nlogonia`, `emoogle`, `mario`, `packing`, `setu`, `event` |
| `simulation` | `loansome`, `snail`, `rfp` |
| `puzzles` | `queens`, `ecological`, `quirksome`, `quirksome-table`, `social-bfs`, `social-dfs` |
| `optimisation` | `bars-memo`, `bars-tab`, `coloring`, `watergate` |

An unknown problem name raises `ValueError`.

## What the package does not do

There is no command-line program: `run` takes the input as a string and
returns the output as a string, and nothing reads standard input or
writes to standard output. To use it against a judge, read the input and
print the result yourself.

## Tests

The test suite uses pytest and lives in `tests/`, one file per module:

```
pip install -e ".[test]"
pytest
```