# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and prints the
operations that sort it, one per line. At the end, stack `a` holds every number
in ascending order from top to bottom and stack `b` is empty.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` | swap the top two elements of `a` / `b` |
| `pa` / `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a` / `b` / both up by one (the top element goes to the bottom) |
| `rra` / `rrb` / `rrr` | rotate `a` / `b` / both down by one (the bottom element comes to the top) |

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments:

```
push-swap 3 2 1
```

or as one argument holding numbers separated by spaces:

```
push-swap "4 67 3 87 23"
```

The command can also be run as `python -m pushswap.cli`.

The first number is the top of stack `a`. Nothing is printed if the input is
already sorted, or if no arguments are given.

Each number is an optional `+` or `-` followed by one to ten digits, within the
signed 32-bit range. When an argument is not such a number or repeats a number,
the command writes `Error` to standard error, prints no operations and exits
with a non-zero status.

## Algorithm

Inputs of two or three numbers given as separate arguments are sorted directly,
in at most two operations. (When two or three numbers come in a single
space-separated argument, no operations are produced for them.)

Larger inputs push everything except three numbers onto `b` and sort the three
left on `a`. Then, one at a time, they move back the element of `b` that costs
the fewest rotations to put in place, doing rotations of both stacks together
where possible. Last, they rotate `a` the short way round so that its smallest
value is on top.

## As a library

```python
from pushswap.cli import solve

operations = solve(["5", "1", "4", "2", "3"])
```

`solve` returns the operations as a list of strings and raises
`pushswap.parsing.ParseError` (a `ValueError`) on invalid input.
`pushswap.parsing.parse_stack` turns arguments into the list of values alone.

`pushswap.stacks.Stacks` holds the two stacks as `a` and `b` and has one method
per operation (`sa`, `pb`, `rrr`, ...). Each operation that takes effect is
appended to `Stacks.moves` unless it is called with `record=False`; a callable
passed as `record` to the constructor is also called with each recorded name:

```python
from pushswap.stacks import Stacks

stacks = Stacks([2, 1], record=print)
stacks.sa()          # prints "sa"
stacks.moves         # ["sa"]
```

`pushswap.sorting` provides the sorting steps themselves: `sort_three`,
`small_sort`, `turk_sort`, `rotate_min_top`, and the cost helpers
`calculate_cost`, `optimize_cost` and `find_position_a`.

## Tests

```
pip install ".[test]"
pytest
```