"""Producing a sequence of stack operations that sorts a list of integers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from pushswap.parsing import is_sorted
from pushswap.stacks import Stacks


def ranks(values: Iterable[int]) -> list[int]:
    """For each value, the number of values in the list smaller than it."""
    values = list(values)
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def find_targets(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """For each value of ``b``, the smallest value of ``a`` above it.

    A value of ``b`` with nothing above it in ``a`` keeps the target found
    for the value before it; if there is none, ValueError is raised.
    """
    a_values = list(a)
    targets: list[int] = []
    target: int | None = None
    for value in b:
        greater = [x for x in a_values if x > value]
        if greater:
            target = min(greater)
        elif target is None:
            raise ValueError(f"no value in stack a is greater than {value}")
        targets.append(target)
    return targets


def push_costs(a: Sequence[int], b: Sequence[int], targets: Sequence[int]) -> list[int]:
    """Rotations needed to bring each value of ``b`` and its target to the tops."""
    size_a = len(a)
    size_b = len(b)
    position_in_a = {value: pos for pos, value in enumerate(a)}
    costs: list[int] = []
    for pos, target in zip(range(size_b), targets):
        cost = size_b - pos if pos > size_b // 2 else pos
        target_pos = position_in_a[target]
        cost += target_pos if target_pos <= size_a // 2 else size_a - target_pos
        costs.append(cost)
    return costs


def chunk_size_for(count: int) -> int:
    """How many values each chunk pushed to ``b`` holds for a list of ``count``."""
    if count <= 100:
        return count // 2
    if count <= 500:
        return count // 4
    return count // 8


def sort_small(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three values."""
    a = stacks.a
    if len(a) < 2:
        return
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def push_to_b(stacks: Stacks, chunk_size: int) -> None:
    """Push all but the three largest values to ``b`` in chunks of rank, then sort ``a``."""
    if chunk_size < 1:
        raise ValueError("chunk size must be at least 1")
    a, b = stacks.a, stacks.b
    rank = dict(zip(a, ranks(a)))
    max_to_push = len(a) - 3
    chunk = 0
    while len(a) > 3:
        pushed = 0
        while pushed < chunk_size and len(a) > 3:
            current = rank[a[0]]
            if current <= (chunk + 1) * chunk_size and current < max_to_push:
                stacks.pb()
                pushed += 1
                if rank[b[0]] < chunk * chunk_size + chunk_size // 2:
                    stacks.rb()
            else:
                stacks.ra()
        chunk += 1
    sort_small(stacks)


def _rotate_together(stacks: Stacks, value: int, target: int, pos_b: int) -> None:
    a, b = stacks.a, stacks.b
    pos_target = a.index(target)
    if pos_b <= len(b) // 2 and pos_target <= len(a) // 2:
        while b[0] != value and a[0] != target:
            if not stacks.rr():
                break
    elif pos_b > len(b) // 2 and pos_target > len(a) // 2:
        while b[0] != value and a[0] != target:
            if not stacks.rrr():
                break


def _rotate_each(stacks: Stacks, value: int, target: int) -> None:
    a, b = stacks.a, stacks.b
    forward_b = stacks.rb if b.index(value) <= len(b) // 2 else stacks.rrb
    while b[0] != value:
        forward_b()
    forward_a = stacks.ra if a.index(target) <= len(a) // 2 else stacks.rra
    while a[0] != target:
        forward_a()


def _bring_smallest_to_top(stacks: Stacks) -> None:
    a = stacks.a
    smallest = min(a)
    step = stacks.ra if a.index(smallest) <= len(a) // 2 else stacks.rra
    while a[0] != smallest:
        step()


def push_back_to_a(stacks: Stacks) -> None:
    """Move every value of ``b`` back onto ``a`` in order, cheapest first."""
    a, b = stacks.a, stacks.b
    while b:
        targets = find_targets(a, b)
        costs = push_costs(a, b, targets)
        cheapest = min(range(len(b)), key=costs.__getitem__)
        value, target = b[cheapest], targets[cheapest]
        _rotate_together(stacks, value, target, cheapest)
        _rotate_each(stacks, value, target)
        stacks.pa()
    _bring_smallest_to_top(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """The operations that sort the distinct ``values``, top of the stack first."""
    values = list(values)
    if is_sorted(values):
        return []
    stacks = Stacks(values, combined_requires_both=True)
    if len(values) <= 3:
        sort_small(stacks)
    else:
        push_to_b(stacks, chunk_size_for(len(values)))
        push_back_to_a(stacks)
    return list(stacks.history)