"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable


class Stacks:
    """Stacks ``a`` and ``b``, with index 0 as the top of each.

    Each move that takes effect is appended to :attr:`moves` when its
    ``record`` flag is true. If a ``record`` callable is given to the
    constructor, it is also called with the name of each recorded move.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        record: Callable[[str], object] | None = None,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.moves: list[str] = []
        self._sink = record

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, name: str, record: bool) -> None:
        if not record:
            return
        self.moves.append(name)
        if self._sink is not None:
            self._sink(name)

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    def sa(self, record: bool = True) -> None:
        """Swap the two top elements of ``a``; nothing happens with fewer than two."""
        if self._swap(self.a):
            self._log("sa", record)

    def sb(self, record: bool = True) -> None:
        """Swap the two top elements of ``b``; nothing happens with fewer than two."""
        if self._swap(self.b):
            self._log("sb", record)

    def pa(self, record: bool = True) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if self._push(self.b, self.a):
            self._log("pa", record)

    def pb(self, record: bool = True) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if self._push(self.a, self.b):
            self._log("pb", record)

    def ra(self, record: bool = True) -> None:
        """Rotate ``a`` up: the top element becomes the bottom one."""
        if self._rotate(self.a, -1):
            self._log("ra", record)

    def rb(self, record: bool = True) -> None:
        """Rotate ``b`` up: the top element becomes the bottom one."""
        if self._rotate(self.b, -1):
            self._log("rb", record)

    def rr(self, record: bool = True) -> None:
        """Rotate both stacks up at once."""
        self.ra(False)
        self.rb(False)
        self._log("rr", record)

    def rra(self, record: bool = True) -> None:
        """Rotate ``a`` down: the bottom element becomes the top one."""
        if self._rotate(self.a, 1):
            self._log("rra", record)

    def rrb(self, record: bool = True) -> None:
        """Rotate ``b`` down: the bottom element becomes the top one."""
        if self._rotate(self.b, 1):
            self._log("rrb", record)

    def rrr(self, record: bool = True) -> None:
        """Rotate both stacks down at once."""
        self.rra(False)
        self.rrb(False)
        self._log("rrr", record)