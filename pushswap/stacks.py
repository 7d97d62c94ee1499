"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from typing import Iterable


class Operation(Enum):
    """A move, with the name it is printed under."""

    PA = "pa"
    PB = "pb"
    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Element:
    """A value on a stack and its rank among all the values."""

    value: int
    index: int


def _swap_top(stack: deque[Element]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of every move made.

    A push from an empty stack does nothing and is not recorded; every
    other move is recorded even when it leaves the stacks unchanged.
    """

    def __init__(self, elements: Iterable[Element]) -> None:
        self.a: deque[Element] = deque(elements)
        self.b: deque[Element] = deque()
        self.operations: list[Operation] = []

    def _record(self, operation: Operation) -> None:
        self.operations.append(operation)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record(Operation.PB)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap_top(self.a)
        self._record(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap_top(self.b)
        self._record(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap_top(self.a)
        _swap_top(self.b)
        self._record(Operation.SS)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self.a.rotate(-1)
        self._record(Operation.RA)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self.b.rotate(-1)
        self._record(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._record(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self.a.rotate(1)
        self._record(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self.b.rotate(1)
        self._record(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.a.rotate(1)
        self.b.rotate(1)
        self._record(Operation.RRR)

    def a_is_sorted(self) -> bool:
        """Whether the values in ``a`` never decrease from top to bottom."""
        return all(upper.value <= lower.value for upper, lower in pairwise(self.a))

    def a_values(self) -> list[int]:
        """The values in ``a``, top first."""
        return [element.value for element in self.a]

    def b_values(self) -> list[int]:
        """The values in ``b``, top first."""
        return [element.value for element in self.b]