"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.conversions import atoi, split
from pushswap.stacks import Node

INT_MIN = -2147483648
INT_MAX = 2147483647


class InvalidArgumentError(ValueError):
    """An argument holds something other than an optionally signed number."""


class DuplicateArgumentError(ValueError):
    """A value repeats, or lies outside the 32-bit signed range."""


def is_numeric(token: str) -> bool:
    """True when ``token`` is an optional sign followed only by digits.

    A bare sign passes, and reads as 0.
    """
    body = token[1:] if token[:1] in ("-", "+") else token
    return all("0" <= ch <= "9" for ch in body)


def join_arguments(args: Iterable[str]) -> str:
    """All arguments joined by single spaces."""
    return " ".join(args)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """The numbers held by ``args``; one argument may hold several, space separated.

    Raises InvalidArgumentError for a token that is not a number and
    DuplicateArgumentError for a repeated or out-of-range value.
    """
    tokens = split(join_arguments(args), " ")
    bad = next((token for token in tokens if not is_numeric(token)), None)
    if bad is not None:
        raise InvalidArgumentError(f"not a number: {bad!r}")
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        value = atoi(token)
        if not INT_MIN <= value <= INT_MAX:
            raise DuplicateArgumentError(f"out of range: {token!r}")
        if value in seen:
            raise DuplicateArgumentError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values


def assign_indices(values: Iterable[int]) -> list[Node]:
    """Nodes for ``values`` in order, each ranked by how many values are smaller."""
    values = list(values)
    rank = {value: position for position, value in enumerate(sorted(set(values)))}
    smaller = {value: sum(1 for other in values if other < value) for value in rank}
    return [Node(data=value, index=smaller[value]) for value in values]