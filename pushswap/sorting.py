"""Strategies that sort stack ``a`` using only the puzzle's moves."""

from __future__ import annotations

from itertools import islice

from pushswap.stacks import Stacks

_CHUNK_FACTOR = 0.048
_CHUNK_BASE = 10


def is_sorted(stacks: Stacks) -> bool:
    """True when the ranks in ``a`` never decrease from top to bottom."""
    a = stacks.a
    return all(x.index <= y.index for x, y in zip(a, islice(a, 1, None)))


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements at the top of ``a``."""
    a = stacks.a
    if len(a) < 3:
        raise ValueError("sorting three needs at least three elements in a")
    first, second, third = (node.index for node in islice(a, 3))
    if first > second and first > third:
        stacks.ra()
    if first < second and second > third:
        stacks.rra()
    if a[0].index > a[1].index:
        stacks.sa()


def bring_biggest_to_top(stacks: Stacks) -> None:
    """Rotate ``a`` until the element of highest rank is on top.

    The direction is chosen by comparing that rank with half the size of ``a``.
    """
    a = stacks.a
    if not a:
        raise ValueError("stack a is empty")
    big = max(a, key=lambda node: node.index)
    rotate = stacks.ra if big.index < len(a) // 2 else stacks.rra
    while a[0].data != big.data:
        rotate()


def sort_four(stacks: Stacks) -> None:
    """Sort four elements: set the biggest aside, sort three, put it back at the bottom."""
    bring_biggest_to_top(stacks)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()
    stacks.ra()


def sort_five(stacks: Stacks) -> None:
    """Sort five elements by setting the biggest aside around a four-element sort."""
    bring_biggest_to_top(stacks)
    stacks.pb()
    sort_four(stacks)
    stacks.pa()
    stacks.ra()


def _bring_biggest_of_b_to_top(stacks: Stacks) -> None:
    b = stacks.b
    big = max(b, key=lambda node: node.index)
    position = next(i for i, node in enumerate(b) if node.index == big.index)
    if position <= len(b) // 2:
        for _ in range(position):
            stacks.rb()
    else:
        for _ in range(len(b) - position):
            stacks.rrb()


def chunk_sort(stacks: Stacks) -> None:
    """Sort any number of elements by pushing them to ``b`` in sliding rank
    windows, then pulling the biggest back to ``a`` one at a time."""
    a = stacks.a
    lower = 0
    upper = int(len(a) * _CHUNK_FACTOR + _CHUNK_BASE)
    while a:
        rank = a[0].index
        if lower <= rank <= upper:
            stacks.pb()
            lower += 1
            upper += 1
        elif rank < lower:
            stacks.pb()
            stacks.rb()
            lower += 1
            upper += 1
        else:
            stacks.ra()
    while stacks.b:
        _bring_biggest_of_b_to_top(stacks)
        stacks.pa()


def check_moves(stacks: Stacks) -> bool:
    """Sort ``a`` with the strategy suited to its size.

    Returns True, doing nothing, when ``a`` is already sorted; False otherwise.
    """
    if is_sorted(stacks):
        return True
    size = len(stacks.a)
    if size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        chunk_sort(stacks)
    return False