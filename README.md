# pushswap

This package sorts a list of distinct integers with two stacks, `a` and `b`,
and the following eleven instructions:

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two items of `a`, of `b`, or of both |
| `pa` / `pb` | move the top of `b` to `a`, or the top of `a` to `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both up by one (the top goes to the bottom) |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both down by one (the bottom goes to the top) |

An instruction that cannot apply does nothing. For example, `sa` does nothing
when `a` holds fewer than two items, and `pa` does nothing when `b` is empty.

The package provides two commands.

## push-swap

This command writes an instruction sequence that sorts the numbers. It writes
one instruction on each line:

```
$ push-swap 3 2 1
ra
sa
```

You can give numbers as separate arguments, as groups inside quotes with
spaces between the numbers, or both (`push-swap "4 67 3" 87 23`). A number may
have a sign.

The command writes `Error` to standard error and exits with status 1 in these
cases:

- a word is not a number
- a number is outside the 32-bit signed range
- a value is repeated
- an argument holds no numbers at all

If the input is already sorted, the command writes nothing. If you give no
arguments, it writes nothing and exits with status 1.

## push-swap-checker

This command reads instructions from standard input, one on each line, and
applies them to the numbers given as arguments. It prints `OK` when `a` is
sorted at the end and `b` is empty, and `KO` otherwise.

The arguments follow the same rules as for `push-swap`. An invalid argument
makes the command write `Error` to standard error and exit with status 1. A
line that is not exactly an instruction name followed by a newline does the
same. If you give no arguments, the command exits with status 1.

```
$ push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
OK
```

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import check

moves = solve([5, 1, 4, 2, 3])
assert check([5, 1, 4, 2, 3], (f"{move}\n" for move in moves))
```

- `solve(values)` returns the list of instruction names that sorts the values.
- `check(values, lines)` takes lines that each end in a newline, as they are
  read from a file. It raises `pushswap.parsing.InputError` at the first line
  that is not valid.

The modules:

- `pushswap.stacks.Stacks` holds the two stacks, with the top of each at
  index 0. It has one method for each instruction, plus `apply(name)` and
  `is_solved()`. Each method returns whether the stacks changed. Every
  instruction that changes the stacks is recorded in `history`.
- `pushswap.parsing` provides `parse_arguments`, `parse_integer`, `is_number`
  and `is_sorted`. They raise `InputError`, a `ValueError`, when the input is
  not valid.
- `pushswap.solver` also provides the separate steps of the algorithm:
  - `ranks`
  - `find_targets`
  - `push_costs`
  - `chunk_size_for`
  - `sort_small`
  - `push_to_b`
  - `push_back_to_a`

## Tests

```
pip install -e ".[test]"
pytest
```