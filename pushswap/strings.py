"""NUL-terminated string helpers over ``str`` and byte buffers.

Text is read up to its first NUL character, as a terminated string would be;
without one the whole object is the string.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Union

Text = Union[str, bytes, bytearray]


def _terminated(data: Text) -> Text:
    nul = data.find("\0") if isinstance(data, str) else data.find(0)
    return data if nul < 0 else data[:nul]


def _units(data: Text) -> list[int]:
    body = _terminated(data)
    if isinstance(body, str):
        return [ord(ch) for ch in body]
    return list(body)


def _target(text: Text, c: int | str) -> int | str:
    if isinstance(text, str):
        return c if isinstance(c, str) else chr(c)
    return ord(c) if isinstance(c, str) else c & 0xFF


def strlen(data: Text) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(data))


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dst`` and terminate it.

    Returns the length of ``src``; with ``size`` 0 nothing is written.
    """
    body = _terminated(src)
    if size == 0:
        return len(body)
    count = min(len(body), size - 1)
    if len(dst) < count + 1:
        raise ValueError("destination buffer too small")
    dst[:count] = body[:count]
    dst[count] = 0
    return len(body)


def strlcat(dst: bytearray | None, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the string in ``dst`` so the result fits ``size`` bytes.

    Returns the length the full concatenation would have, or ``size`` plus
    the length of ``src`` when ``size`` does not exceed the string in ``dst``.
    """
    slen = strlen(src)
    if dst is None:
        if size == 0:
            return slen
        raise ValueError("no destination buffer")
    dlen = strlen(dst)
    if size <= dlen:
        return size + slen
    count = min(slen, size - dlen - 1)
    if len(dst) < dlen + count + 1:
        raise ValueError("destination buffer too small")
    dst[dlen:dlen + count] = src[:count]
    dst[dlen + count] = 0
    return dlen + slen


def strchr(text: Text, c: int | str) -> int | None:
    """Position of the first ``c`` in ``text``; NUL finds the terminator."""
    body = _terminated(text)
    target = _target(text, c)
    if target in ("\0", 0):
        return len(body)
    pos = body.find(target)
    return None if pos < 0 else pos


def strrchr(text: Text, c: int | str) -> int | None:
    """Position of the last ``c`` in ``text``; NUL finds the terminator."""
    body = _terminated(text)
    target = _target(text, c)
    if target in ("\0", 0):
        return len(body)
    pos = body.rfind(target)
    return None if pos < 0 else pos


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch."""
    pairs = zip_longest(_units(s1), _units(s2), fillvalue=0)
    for x, y in islice(pairs, n):
        if x != y:
            return x - y
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> int | None:
    """Position of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    wanted = _terminated(needle)
    if not wanted:
        return 0
    body = _terminated(haystack)
    last = min(len(body), length - len(wanted) + 1)
    return next((i for i in range(last) if body.startswith(wanted, i)), None)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(position, character)`` for each character."""
    return "".join(func(i, ch) for i, ch in enumerate(_terminated(text)))


def striteri(
    buffer: MutableSequence,
    func: Callable[[int, object], object],
) -> None:
    """Call ``func(position, value)`` on each element up to a NUL, in place.

    A return value other than None replaces the element.
    """
    for i, value in enumerate(buffer):
        if value in (0, "\0"):
            break
        replacement = func(i, value)
        if replacement is not None:
            buffer[i] = replacement