import random

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _apply_output(values, output):
    stacks = Stacks(values, combined_requires_both=True)
    for line in output.splitlines():
        assert stacks.apply(line)
    return stacks


def test_no_arguments_returns_one(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_three_values_needing_one_swap(capsys):
    assert main(["2 1 3"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize(
    "args",
    [
        ["1", "a"],
        ["1", "1"],
        ["2147483648"],
        ["-2147483649"],
        [""],
        ["   "],
        ["+"],
        ["1 2", "3 2"],
    ],
)
def test_invalid_arguments_report_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_limits_are_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    stacks = _apply_output([2147483647, -2147483648], capsys.readouterr().out)
    assert stacks.is_solved()


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 10, 25, 100, 150])
def test_output_sorts_random_input(capsys, size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    assert main([str(v) for v in values]) == 0
    stacks = _apply_output(values, capsys.readouterr().out)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(values)


def test_values_split_across_arguments(capsys):
    values = [5, 3, 9, 1, 7]
    assert main(["5 3", "9", " 1  7 "]) == 0
    stacks = _apply_output(values, capsys.readouterr().out)
    assert list(stacks.a) == sorted(values)