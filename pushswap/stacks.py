"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, TextIO


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    data: int
    index: int = 0


class Stacks:
    """Stacks ``a`` and ``b``, top of each at the left end.

    Every move that changes something writes its name on a line of its own
    to ``out``.
    """

    def __init__(self, nodes: Iterable[Node] = (), out: TextIO | None = None) -> None:
        self.a: deque[Node] = deque(nodes)
        self.b: deque[Node] = deque()
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _emit(self, name: str) -> None:
        self.out.write(f"{name}\n")

    @staticmethod
    def _swap(stack: deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(-1)
        return True

    @staticmethod
    def _reverse_rotate(stack: deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(1)
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of ``a`` and ``b``; ``b`` is untouched if ``a`` cannot swap."""
        if self._swap(self.a) and self._swap(self.b):
            self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.b:
            self.a.appendleft(self.b.popleft())
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.a:
            self.b.appendleft(self.a.popleft())
            self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` so its top becomes its bottom."""
        if self._rotate(self.a):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` so its top becomes its bottom."""
        if self._rotate(self.b):
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks; ``b`` is untouched if ``a`` cannot rotate."""
        if self._rotate(self.a) and self._rotate(self.b):
            self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` so its bottom becomes its top."""
        if self._reverse_rotate(self.a):
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` so its bottom becomes its top."""
        if self._reverse_rotate(self.b):
            self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks; ``b`` is untouched if ``a`` cannot."""
        if self._reverse_rotate(self.a) and self._reverse_rotate(self.b):
            self._emit("rrr")