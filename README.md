# pushswap

Two stacks, `a` and `b`, and eleven instructions to move integers between
them:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two values of a, b, or both |
| `pa`, `pb` | push the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate a, b, or both down by one (bottom goes to top) |

An instruction with nothing to act on (for example `pa` with b empty, or `sa`
with fewer than two values in a) leaves the stacks unchanged.

The goal is to leave stack `a` in ascending order, smallest value on top.
This package does two things: it finds an instruction sequence that sorts a
list of integers, and it checks whether a given sequence sorts a given list.

## Installation

```
pip install .
```

## Sorting

Give the integers as arguments. Several numbers may share one argument if
they are separated by spaces:

```
$ push-swap 3 1 2
ra
$ push-swap "5 2 9" 1 7
```

One instruction is printed per line. If the input is already sorted, or no
arguments are given, nothing is printed. If the input is invalid, `Error` is
written to standard error and the command exits with status 1. Input is
invalid if an argument holds anything other than space-separated integers
(an optional `+` or `-` followed by digits), if the same number is written
twice, or if a number is too large for a 32-bit signed integer.

Up to three values are sorted in place on stack a. Four or five values are
pushed to b down to three, and then inserted back one at a time. Larger
inputs are handled the same way, except that values above the median are
rotated to the bottom of b as they are pushed; values are brought back in
the order that needs the fewest rotations.

From Python:

```python
from pushswap.sorter import Sorter, sort_values

instructions = sort_values([3, 1, 2])   # [Instruction.RA]

sorter = Sorter([5, 4, 3, 2, 1, 0])
sorter.run()
print(sorter.a, sorter.instructions)
```

## Checking

`push-swap-checker` takes the same arguments and reads instructions from
standard input, one per line. It prints `OK` if they leave stack `a` sorted
and `KO` if they do not:

```
$ push-swap 4 3 2 1 0 | push-swap-checker 4 3 2 1 0
OK
```

Only stack `a` is judged: values left on stack `b` do not make the result
`KO`, but an empty stack `a` does. `Error` is written to standard error, with
exit status 1, for an invalid list of numbers, for empty input, for an
unknown instruction, for any character other than lower-case letters and
newlines, or for an empty line between instructions. Because empty input is
an error, an already sorted list given with no instructions prints `Error`,
not `OK`.

From Python:

```python
from pushswap.checker import parse_instructions, run_checker

steps = parse_instructions("ra\n")
print(run_checker([3, 1, 2], steps))   # True
```

`parse_instructions` and `validate_instruction_text` raise `InstructionError`.

## Modules

- `pushswap.stacks`: `Stacks` (the two stacks, one method per instruction and
  `apply`), `Instruction` and `is_sorted`.
- `pushswap.parsing`: `parse_args`, which raises `ParseError`, and the checks
  it is built from (`split_args`, `is_valid`, `has_duplicates`, `overflows`,
  `to_int`).
- `pushswap.search`: `position`, `rotation_cost`, `closest_smaller_target`,
  `closest_bigger_target` and `cheapest`, used to pick the next move.
- `pushswap.sorter`: `Sorter`, `sort_values` and the `push-swap` command.
- `pushswap.checker`: `parse_instructions`, `run_checker` and the
  `push-swap-checker` command.

## Running the tests

```
pip install ".[test]"
pytest
```