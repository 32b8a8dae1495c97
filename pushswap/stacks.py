"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _move_top(source: deque[int], target: deque[int]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``, each with its top at index 0.

    Every operation that changes the stacks is appended to ``history``; an
    operation that cannot apply leaves both the stacks and the history alone.

    With ``combined_requires_both`` set, ``ss``, ``rr`` and ``rrr`` act only
    when both stacks hold at least two values; otherwise they act on each
    stack that can take the operation.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        combined_requires_both: bool = False,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.combined_requires_both = combined_requires_both
        self.history: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str, changed: bool) -> bool:
        if changed:
            self.history.append(name)
        return changed

    def _combined(self, name: str, op: Callable[[deque[int]], bool]) -> bool:
        if self.combined_requires_both:
            if len(self.a) < 2 or len(self.b) < 2:
                return False
            op(self.a)
            op(self.b)
            return self._record(name, True)
        changed_a = op(self.a)
        changed_b = op(self.b)
        return self._record(name, changed_a or changed_b)

    def sa(self) -> bool:
        """Swap the two top values of ``a``."""
        return self._record("sa", _swap(self.a))

    def sb(self) -> bool:
        """Swap the two top values of ``b``."""
        return self._record("sb", _swap(self.b))

    def ss(self) -> bool:
        """``sa`` and ``sb`` together."""
        return self._combined("ss", _swap)

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        return self._record("pa", _move_top(self.b, self.a))

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        return self._record("pb", _move_top(self.a, self.b))

    def ra(self) -> bool:
        """Move the top of ``a`` to its bottom."""
        return self._record("ra", _rotate(self.a))

    def rb(self) -> bool:
        """Move the top of ``b`` to its bottom."""
        return self._record("rb", _rotate(self.b))

    def rr(self) -> bool:
        """``ra`` and ``rb`` together."""
        return self._combined("rr", _rotate)

    def rra(self) -> bool:
        """Move the bottom of ``a`` to its top."""
        return self._record("rra", _reverse_rotate(self.a))

    def rrb(self) -> bool:
        """Move the bottom of ``b`` to its top."""
        return self._record("rrb", _reverse_rotate(self.b))

    def rrr(self) -> bool:
        """``rra`` and ``rrb`` together."""
        return self._combined("rrr", _reverse_rotate)

    def apply(self, name: str) -> bool:
        """Run the operation called ``name``; raise ValueError for an unknown one."""
        operations: dict[str, Callable[[], bool]] = {
            "sa": self.sa,
            "sb": self.sb,
            "ss": self.ss,
            "pa": self.pa,
            "pb": self.pb,
            "ra": self.ra,
            "rb": self.rb,
            "rr": self.rr,
            "rra": self.rra,
            "rrb": self.rrb,
            "rrr": self.rrr,
        }
        try:
            operation = operations[name]
        except KeyError:
            raise ValueError(f"unknown operation: {name!r}") from None
        return operation()

    def is_solved(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        if self.b:
            return False
        values = list(self.a)
        return all(x <= y for x, y in zip(values, values[1:]))