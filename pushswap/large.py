"""Sorting by halving ranges of ranks between the two stacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pushswap.parse import INT_MAX, INT_MIN
from pushswap.small import small_sort
from pushswap.stacks import Stacks

SMALL_LIMIT = 10
NARROW_RANGE = 10
DIRECT_RETURN = 50


def find_median(high: int, low: int) -> int:
    """The point halfway from ``low`` to ``high``, rounded towards ``low``."""
    diff = high - low
    half = diff // 2 if diff >= 0 else -((-diff) // 2)
    return low + half


def choose_rotation(indices: Iterable[int], target: int) -> bool:
    """Whether ``target`` is reached sooner by rotating downwards.

    ``indices`` runs from top to bottom. A missing target gives False.
    """
    indices = list(indices)
    try:
        from_top = indices.index(target)
    except ValueError:
        return False
    from_bottom = indices[::-1].index(target)
    return from_bottom < from_top


@dataclass
class Bounds:
    """The middle, highest and lowest rank of interest on one stack."""

    mid: int
    high: int
    low: int


class Sorter:
    """Sorts the ranks on ``a`` in ascending order, recording every move."""

    def __init__(self, stacks: Stacks, total: int) -> None:
        self.stacks = stacks
        self.total = total
        self.a_bounds = Bounds(mid=0, high=total - 1, low=0)
        self.b_bounds = Bounds(mid=0, high=INT_MIN, low=INT_MAX)

    def run(self) -> None:
        """Sort until ``a`` holds every value in ascending order."""
        stacks = self.stacks
        while not (stacks.a_is_sorted() and len(stacks.a) == self.total):
            if len(stacks.a) <= SMALL_LIMIT:
                small_sort(stacks)
            else:
                self._send_to_b()
                self._return_to_a(self.b_bounds.high)

    def _last_index(self) -> int:
        return self.stacks.a[-1].index

    def _b_indices(self) -> list[int]:
        return [element.index for element in self.stacks.b]

    def _send_b(self) -> None:
        self.stacks.pb()
        top = self.stacks.b[0].index
        self.b_bounds.high = max(self.b_bounds.high, top)
        self.b_bounds.low = min(self.b_bounds.low, top)

    def _has_smaller(self) -> bool:
        a = self.a_bounds
        return any(a.low <= element.index <= a.mid for element in self.stacks.a)

    def _send_to_b(self) -> None:
        a, b = self.a_bounds, self.b_bounds
        size = len(self.stacks.a)
        b.high = INT_MIN
        b.low = INT_MAX
        a.mid = find_median(a.high, a.low)
        if a.high - a.low < NARROW_RANGE:
            while self.stacks.a and self.stacks.a[0].index >= a.low:
                self._send_b()
        else:
            self._send_min(size)

    def _send_min(self, size: int) -> None:
        stacks = self.stacks
        rotations = 0
        for _ in range(size):
            if not self._has_smaller():
                break
            if stacks.a[0].index <= self.a_bounds.mid:
                self._send_b()
            else:
                stacks.ra()
                rotations += 1
        if self.a_bounds.low:
            for _ in range(rotations):
                stacks.rra()

    def _init_b_value(self) -> None:
        indices = self._b_indices()
        b = self.b_bounds
        b.high = max(indices, default=INT_MIN)
        b.low = min(indices, default=INT_MAX)
        b.mid = find_median(b.high, b.low)

    def _send_smallest_to_a(self) -> None:
        self.stacks.pa()
        self.stacks.ra()
        self.a_bounds.low += 1
        self.b_bounds.low += 1

    def _send_biggest_to_a(self) -> None:
        self.stacks.pa()
        self.b_bounds.high -= 1
        if self.stacks.a[0].index == self.a_bounds.low:
            self.stacks.ra()
            self.a_bounds.low += 1

    def _rotate_b_towards_low(self) -> None:
        if choose_rotation(self._b_indices(), self.a_bounds.low):
            self.stacks.rrb()
        else:
            self.stacks.rb()

    def _start_sort(self) -> None:
        stacks = self.stacks
        while True:
            size = len(stacks.b)
            self._init_b_value()
            if size == 0:
                return
            top = stacks.b[0].index
            if top > self.b_bounds.mid or size == 1:
                stacks.pa()
            elif top == self.a_bounds.low:
                self._send_smallest_to_a()
            else:
                self._rotate_b_towards_low()

    def _complete_sort(self) -> None:
        stacks = self.stacks
        while True:
            size = len(stacks.b)
            self._init_b_value()
            if size == 0:
                self._order_a()
                return
            top = stacks.b[0].index
            if size == 1:
                stacks.pa()
            elif top == self.a_bounds.low:
                self._send_smallest_to_a()
            elif top == self.b_bounds.high:
                self._send_biggest_to_a()
            else:
                self._rotate_b_towards_low()

    def _resend_b(self, limit: int) -> None:
        a = self.stacks.a
        while a and self.a_bounds.low <= a[0].index <= limit:
            self.stacks.pb()

    def _return_to_a(self, limit: int) -> None:
        while len(self.stacks.b) >= DIRECT_RETURN:
            self._start_sort()
            self._resend_b(limit)
        self._complete_sort()

    def _order_a(self) -> None:
        stacks = self.stacks
        a = stacks.a
        if a[0].index == 0:
            stacks.ra()
        while a[0].index + 1 == a[1].index and a[0].index - 1 == self._last_index():
            stacks.ra()
        if a[0].index - 1 == self._last_index():
            stacks.ra()
        self.a_bounds.low = self._last_index() + 1