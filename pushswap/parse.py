"""Reading the numbers to sort from the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.stacks import Element

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""


def parse_int(text: str) -> int:
    """Read a signed 32-bit integer; anything after the digits is an error.

    Leading whitespace and one sign are allowed.
    """
    body = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if any(ch not in _DIGITS for ch in body):
        raise InputError(f"not an integer: {text!r}")
    result = sign * int(body) if body else 0
    if not INT_MIN <= result <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return result


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments (without the program name) into integers.

    A single argument holds space-separated numbers; several arguments
    hold one number each.
    """
    if not args:
        raise InputError("no arguments")
    if len(args) == 1:
        words = split_words(args[0], " ")
        if not words:
            raise InputError("no numbers given")
    else:
        words = list(args)
    return [parse_int(word) for word in words]


def rank(values: Iterable[int]) -> list[int]:
    """The position of each value in sorted order; values must be distinct."""
    values = list(values)
    positions = {value: position for position, value in enumerate(sorted(values))}
    if len(positions) != len(values):
        raise InputError("duplicate values")
    return [positions[value] for value in values]


def build_elements(values: Iterable[int]) -> list[Element]:
    """Pair each value with its rank."""
    values = list(values)
    return [Element(value, index) for value, index in zip(values, rank(values))]