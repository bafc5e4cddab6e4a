"""String helpers: number conversion, splitting, trimming and joining."""

from __future__ import annotations

_SPACES = " \f\n\r\t\v"


def atoi(text: str) -> int:
    """Read a leading decimal integer.

    Leading whitespace is skipped and one sign is accepted; reading stops at
    the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading '-' when negative."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """The non-empty runs of ``text`` between occurrences of ``sep``."""
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """How many non-empty runs ``text`` holds between occurrences of ``sep``."""
    return len(split(text, sep))


def strtrim(text: str, charset: str) -> str:
    """``text`` without the leading and trailing characters found in ``charset``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent."""
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def strdup(text: str | None) -> str | None:
    """A copy of ``text``, or None when there is none."""
    if text is None:
        return None
    return str(text)