"""The two stacks and the operations that move numbers between them."""

from __future__ import annotations

import enum
from collections import deque
from typing import Iterable


class Which(enum.Enum):
    """Which stack an operation acts on."""

    A = "a"
    B = "b"
    BOTH = "both"


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values never decrease from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


class PushSwapStacks:
    """Stacks a and b, top at index 0, recording each operation performed.

    Every operation that changes a stack appends its name (``sa``, ``ra``,
    ``rrr``, ``pb`` and so on) to :attr:`operations`; an operation that
    would have no effect is skipped and not recorded.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def _stack(self, which: Which) -> deque[int]:
        if which is Which.A:
            return self.a
        if which is Which.B:
            return self.b
        raise ValueError(f"operation needs a single stack, got {which}")

    def swap(self, which: Which) -> None:
        """Exchange the two top numbers of one stack (``sa`` / ``sb``)."""
        stack = self._stack(which)
        if len(stack) < 2:
            return
        stack[0], stack[1] = stack[1], stack[0]
        self.operations.append("s" + which.value)

    def _shift(self, which: Which, step: int, prefix: str) -> None:
        if which is Which.BOTH:
            if len(self.a) < 2 or len(self.b) < 2:
                return
            self.a.rotate(step)
            self.b.rotate(step)
            self.operations.append(prefix + "r")
            return
        stack = self._stack(which)
        if len(stack) < 2:
            return
        stack.rotate(step)
        self.operations.append(prefix + which.value)

    def rotate(self, which: Which) -> None:
        """Move the top number to the bottom (``ra`` / ``rb`` / ``rr``)."""
        self._shift(which, -1, "r")

    def reverse_rotate(self, which: Which) -> None:
        """Move the bottom number to the top (``rra`` / ``rrb`` / ``rrr``)."""
        self._shift(which, 1, "rr")

    def push_a(self) -> None:
        """Move the top of b onto a (``pa``)."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.operations.append("pa")

    def push_b(self) -> None:
        """Move the top of a onto b (``pb``)."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.operations.append("pb")