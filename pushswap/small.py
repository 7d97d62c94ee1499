"""Sorting stack ``a`` when it holds at most a handful of values."""

from __future__ import annotations

from pushswap.stacks import Stacks


def sort_three(stacks: Stacks) -> None:
    """Sort three values on ``a`` in place with at most two moves."""
    if stacks.a_is_sorted():
        return
    values = stacks.a_values()
    lowest, highest = min(values), max(values)
    if values[0] == lowest:
        stacks.rra()
        stacks.sa()
    elif values[0] == highest:
        stacks.ra()
        if not stacks.a_is_sorted():
            stacks.sa()
    elif values[1] == lowest:
        stacks.sa()
    else:
        stacks.rra()


def _push_minimums(stacks: Stacks) -> None:
    """Push the smallest values to ``b`` until three remain on ``a``."""
    while len(stacks.a) > 3:
        lowest = min(stacks.a_values())
        if stacks.a[0].value == lowest:
            stacks.pb()
        elif stacks.a[-1].value == lowest:
            stacks.rra()
        else:
            stacks.ra()


def _push_back(stacks: Stacks) -> None:
    """Bring everything on ``b`` back to ``a``, larger values first."""
    while stacks.b:
        if len(stacks.b) > 1 and stacks.b[0].value < stacks.b[1].value:
            stacks.sb()
        stacks.pa()


def small_sort(stacks: Stacks) -> None:
    """Sort ``a`` by parking its minimums on ``b`` and sorting the last three."""
    while not (stacks.a_is_sorted() and not stacks.b):
        if len(stacks.a) == 2:
            stacks.sa()
            return
        if len(stacks.a) < 2:
            raise ValueError("stack a needs at least two values while b is not empty")
        if len(stacks.a) == 3:
            sort_three(stacks)
            _push_back(stacks)
        else:
            _push_minimums(stacks)