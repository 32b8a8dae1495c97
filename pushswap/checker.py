"""Command that checks whether a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import OPERATIONS, Stacks

_VALID_LINES = frozenset(f"{name}\n" for name in OPERATIONS)


def run_instructions(stacks: Stacks, lines: Iterable[str]) -> None:
    """Apply each line, an operation name ending in a newline, to ``stacks``.

    Raises InputError at the first line that is not exactly an operation
    name followed by a newline; the lines before it have been applied.
    """
    for line in lines:
        if line not in _VALID_LINES:
            raise InputError(f"invalid instruction: {line!r}")
        stacks.apply(line[:-1])


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """True when the instructions in ``lines`` sort ``values`` and empty ``b``."""
    stacks = Stacks(values)
    run_instructions(stacks, lines)
    return stacks.is_solved()


def _stdin_lines() -> Iterator[str]:
    raw = getattr(sys.stdin, "buffer", None)
    if raw is None:
        yield from sys.stdin
        return
    for line in raw:
        yield line.decode("utf-8", "surrogateescape")


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``.

    Returns 1 when no argument is given, and writes ``Error`` to standard
    error and returns 1 when the arguments or an instruction are invalid.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        solved = check(values, _stdin_lines())
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())