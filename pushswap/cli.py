"""Command that prints the operations sorting the integers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, is_sorted, parse_arguments
from pushswap.solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the given integers.

    Returns 1 when no argument is given or the arguments are invalid; in
    the latter case ``Error`` is written to standard error.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if is_sorted(values):
        return 0
    operations = solve(values)
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())