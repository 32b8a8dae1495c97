from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import OPERATIONS, Stacks

int_lists = st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=12)


def test_sa_swaps_top_two():
    s = Stacks([3, 1, 2])
    assert s.sa() is True
    assert list(s.a) == [1, 3, 2]
    assert s.history == ["sa"]


def test_swap_on_short_stack_does_nothing():
    s = Stacks([5], [7])
    assert s.sa() is False
    assert s.sb() is False
    assert list(s.a) == [5]
    assert list(s.b) == [7]
    assert s.history == []


def test_pb_and_pa_move_tops():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert list(s.a) == [3]
    assert list(s.b) == [2, 1]
    s.pa()
    assert list(s.a) == [2, 3]
    assert list(s.b) == [1]
    assert s.history == ["pb", "pb", "pa"]


def test_push_from_empty_does_nothing():
    s = Stacks([1, 2])
    assert s.pa() is False
    assert list(s.a) == [1, 2]
    assert s.history == []


def test_ra_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.ra()
    assert list(s.a) == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert list(s.a) == [3, 1, 2]


def test_rb_and_rrb_on_b():
    s = Stacks([], [4, 5, 6])
    s.rb()
    assert list(s.b) == [5, 6, 4]
    s.rrb()
    assert list(s.b) == [4, 5, 6]
    assert s.history == ["rb", "rrb"]


@pytest.mark.parametrize("name", ["ss", "rr", "rrr"])
def test_strict_combined_needs_both(name):
    s = Stacks([1, 2, 3], [9], combined_requires_both=True)
    assert s.apply(name) is False
    assert list(s.a) == [1, 2, 3]
    assert list(s.b) == [9]
    assert s.history == []


@pytest.mark.parametrize(
    "name, expected_a",
    [("ss", [2, 1, 3]), ("rr", [2, 3, 1]), ("rrr", [3, 1, 2])],
)
def test_lenient_combined_acts_on_one(name, expected_a):
    s = Stacks([1, 2, 3], [9])
    assert s.apply(name) is True
    assert list(s.a) == expected_a
    assert list(s.b) == [9]
    assert s.history == [name]


def test_strict_combined_acts_on_both():
    s = Stacks([1, 2], [3, 4], combined_requires_both=True)
    s.ss()
    assert list(s.a) == [2, 1]
    assert list(s.b) == [4, 3]
    s.rr()
    assert list(s.a) == [1, 2]
    assert list(s.b) == [3, 4]
    assert s.history == ["ss", "rr"]


def test_apply_unknown_raises():
    s = Stacks([1, 2])
    with pytest.raises(ValueError):
        s.apply("rx")
    assert list(s.a) == [1, 2]


def test_is_solved():
    assert Stacks([1, 2, 3]).is_solved() is True
    assert Stacks([2, 1, 3]).is_solved() is False
    assert Stacks([1, 2], [3]).is_solved() is False


@given(int_lists)
def test_rotate_then_reverse_restores(values):
    s = Stacks(values)
    s.ra()
    s.rra()
    assert list(s.a) == values


@given(int_lists)
def test_double_swap_restores(values):
    s = Stacks(values)
    s.sa()
    s.sa()
    assert list(s.a) == values


@given(int_lists)
def test_push_round_trip(values):
    s = Stacks(values)
    s.pb()
    s.pa()
    assert list(s.a) == values
    assert list(s.b) == []


@given(int_lists, int_lists, st.lists(st.sampled_from(OPERATIONS), max_size=30), st.booleans())
def test_operations_preserve_values(a, b, names, strict):
    s = Stacks(a, b, combined_requires_both=strict)
    for name in names:
        s.apply(name)
    assert Counter(s.a) + Counter(s.b) == Counter(a) + Counter(b)
    assert set(s.history) <= set(names)
    assert len(s.history) <= len(names)