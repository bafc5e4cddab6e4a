"""A singly linked list of values with O(1) access to both ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Link(Generic[T]):
    value: T
    next: Optional["_Link[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list; iteration runs from the front to the back."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Link[T] | None = None
        self._tail: _Link[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: T) -> None:
        """Put ``value`` before the current first element."""
        link = _Link(value, self._head)
        self._head = link
        if self._tail is None:
            self._tail = link
        self._size += 1

    def push_back(self, value: T) -> None:
        """Put ``value`` after the current last element."""
        link = _Link(value)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> T | None:
        """The last value, or None when the list is empty."""
        return None if self._tail is None else self._tail.value

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        link = self._head
        self._head = link.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return link.value

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on each value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """A new list holding ``func`` applied to each value, in order."""
        return LinkedList(func(value) for value in self)