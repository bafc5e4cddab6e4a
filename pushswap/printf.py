"""A small formatted-output facility with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_CONSUMING = frozenset("cdiuspxX")
_INT_BITS = 32
_POINTER_BITS = 64


def _signed(n: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((n + half) % (1 << bits)) - half


def _unsigned(n: int, bits: int) -> int:
    return n % (1 << bits)


def format_hex(n: int, spec: str) -> str:
    """Hexadecimal digits of a non-negative ``n``; lower case for 'x', upper otherwise."""
    if n < 0:
        raise ValueError("hexadecimal conversion needs a non-negative number")
    digits = format(n, "x")
    return digits if spec == "x" else digits.upper()


def format_conversion(spec: str, arg: Any = None) -> str:
    """Text produced by one conversion ``spec`` applied to ``arg``.

    Integers are narrowed to the width the conversion reads: 32 bits for
    d, i, u, x and X, 64 bits for p. An unknown conversion produces nothing.
    """
    if spec == "%":
        return "%"
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError(f"expected a single character, got {arg!r}")
            return arg
        return chr(_unsigned(arg, 8))
    if spec in ("d", "i"):
        return str(_signed(arg, _INT_BITS))
    if spec == "u":
        return str(_unsigned(arg, _INT_BITS))
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        address = 0 if arg is None else _unsigned(arg, _POINTER_BITS)
        return "0x" + format_hex(address, "x")
    if spec in ("x", "X"):
        return format_hex(_unsigned(arg, _INT_BITS), spec)
    return ""


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _CONSUMING:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            yield format_conversion(spec, arg)
        else:
            yield format_conversion(spec)


def format_string(fmt: str, *args: Any) -> str:
    """The text ``fmt`` describes, with each conversion taking the next argument.

    A lone '%' at the end of ``fmt`` is dropped.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    out = stream if stream is not None else sys.stdout
    out.write(text)
    return len(text)