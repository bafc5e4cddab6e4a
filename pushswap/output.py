"""Write characters, strings, lines and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _stream(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(stream).write(c)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; nothing is written when it is None."""
    if text is None:
        return
    _stream(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; nothing when it is None."""
    if text is None:
        return
    out = _stream(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an integer, got {n!r}")
    _stream(stream).write(str(n))