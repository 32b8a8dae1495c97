"""Reading the integers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the arguments do not describe a list of distinct integers."""


def is_number(text: str) -> bool:
    """True when ``text`` is an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def parse_integer(text: str) -> int:
    """Read one word as a 32-bit signed integer."""
    if not is_number(text):
        raise InputError(f"not an integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Split every argument on spaces and read the words as distinct integers.

    An argument holding no word at all is an error, as is a word that is not
    an integer, one outside the 32-bit range, or a value seen before.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        words = [word for word in arg.split(" ") if word]
        if not words:
            raise InputError(f"empty argument: {arg!r}")
        for word in words:
            value = parse_integer(word)
            if value in seen:
                raise InputError(f"duplicate value: {value}")
            seen.add(value)
            values.append(value)
    return values


def is_sorted(values: Sequence[int]) -> bool:
    """True when ``values`` never decreases."""
    return all(x <= y for x, y in zip(values, values[1:]))