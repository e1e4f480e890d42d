"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import pairwise

from .parsing import ParseError, parse_stack
from .sorting import small_sort, turk_sort
from .stacks import Stacks


def is_ordered(values: Sequence[int]) -> bool:
    """Tell whether ``values`` are in ascending order from the top."""
    return all(first <= second for first, second in pairwise(values))


def solve(args: Sequence[str]) -> list[str]:
    """Return the moves that sort the numbers given as program arguments.

    Raises :class:`ParseError` when the arguments are not a valid stack.
    """
    if not args:
        return []
    values = parse_stack(args)
    if is_ordered(values):
        return []
    stacks = Stacks(values)
    if len(values) <= 3:
        small_sort(stacks, len(args) + 1)
    else:
        turk_sort(stacks)
    return stacks.moves


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (the process arguments by default)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        moves = solve(args)
    except ParseError:
        return sys.stderr.write("Error\n")
    for move in moves:
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())