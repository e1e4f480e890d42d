"""Sorting stack ``a`` with the fewest moves the strategy can find."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from itertools import pairwise

from .stacks import Stacks


@dataclass(frozen=True)
class Cost:
    """Rotations needed to bring one element of ``b`` home into ``a``.

    A positive count means rotating up, a negative one rotating down.
    """

    cost_a: int
    cost_b: int
    total_cost: int
    value: int


def get_value(values: Sequence[int], index: int) -> int:
    """Return the element at ``index``, or 0 when there is none."""
    if 0 <= index < len(values):
        return values[index]
    return 0


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three elements in at most two moves."""
    first, second, third = (get_value(stacks.a, i) for i in range(3))
    if first > second and first > third:
        stacks.ra()
    elif second > first and second > third:
        stacks.rra()
    if get_value(stacks.a, 0) > get_value(stacks.a, 1):
        stacks.sa()


def small_sort(stacks: Stacks, arg_count: int) -> None:
    """Sort two or three elements; ``arg_count`` counts the program name too."""
    count = arg_count - 1
    if count == 2 and get_value(stacks.a, 0) > get_value(stacks.a, 1):
        stacks.sa()
    elif count == 3:
        sort_three(stacks)


def find_position_a(a: Sequence[int], value: int) -> int:
    """Return the index in ``a`` at which ``value`` belongs to keep it in order."""
    if not a:
        return 0
    smallest = min(a)
    if value < smallest or value > max(a):
        return list(a).index(smallest)
    for position, (current, following) in enumerate(pairwise(a)):
        if current < value < following:
            return position + 1
    return 0


def _signed_distance(index: int, size: int) -> int:
    return index if index <= size // 2 else index - size


def calculate_cost(a: Sequence[int], b: Sequence[int], index_b: int) -> Cost:
    """Work out the rotations that move ``b[index_b]`` into its place in ``a``."""
    value = get_value(b, index_b)
    cost_a = _signed_distance(find_position_a(a, value), len(a))
    cost_b = _signed_distance(index_b, len(b))
    return Cost(cost_a, cost_b, abs(cost_a) + abs(cost_b), value)


def optimize_cost(cost: Cost) -> Cost:
    """Account for rotations in the same direction being done together."""
    same_direction = (cost.cost_a > 0 and cost.cost_b > 0) or (
        cost.cost_a < 0 and cost.cost_b < 0
    )
    if not same_direction:
        return cost
    shared = min(abs(cost.cost_a), abs(cost.cost_b))
    return replace(cost, total_cost=cost.total_cost - shared)


def move_stack(stacks: Stacks, cost: int, name: str) -> None:
    """Rotate stack ``name`` (``'a'`` or else ``'b'``) by ``cost`` steps."""
    on_a = name == "a"
    up = stacks.ra if on_a else stacks.rb
    down = stacks.rra if on_a else stacks.rrb
    for _ in range(max(cost, 0)):
        up()
    for _ in range(max(-cost, 0)):
        down()


def _find_cheapest(a: Sequence[int], b: Sequence[int]) -> Cost:
    best: Cost | None = None
    for index in range(len(b)):
        cost = optimize_cost(calculate_cost(a, b, index))
        if best is None or cost.total_cost < best.total_cost:
            best = cost
    if best is None:
        raise ValueError("stack b is empty")
    return best


def _execute(stacks: Stacks, cost: Cost) -> None:
    cost_a, cost_b = cost.cost_a, cost.cost_b
    while cost_a > 0 and cost_b > 0:
        stacks.rr()
        cost_a -= 1
        cost_b -= 1
    while cost_a < 0 and cost_b < 0:
        stacks.rrr()
        cost_a += 1
        cost_b += 1
    move_stack(stacks, cost_a, "a")
    move_stack(stacks, cost_b, "b")
    stacks.pa()


def rotate_min_top(stacks: Stacks) -> None:
    """Rotate ``a`` the short way round until its smallest element is on top."""
    if not stacks.a:
        return
    size = len(stacks.a)
    index = list(stacks.a).index(min(stacks.a))
    if index <= size // 2:
        for _ in range(index):
            stacks.ra()
    else:
        for _ in range(size - index):
            stacks.rra()


def turk_sort(stacks: Stacks) -> None:
    """Sort ``a`` of more than three elements, using ``b`` as scratch space."""
    while len(stacks.a) > 3:
        stacks.pb()
    sort_three(stacks)
    while stacks.b:
        _execute(stacks, _find_cheapest(stacks.a, stacks.b))
    rotate_min_top(stacks)