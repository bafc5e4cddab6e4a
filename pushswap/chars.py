"""Classification and case mapping of single ASCII characters.

Each function takes either a one-character string or a character code.
"""

from __future__ import annotations


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: int | str) -> int | str:
    """Map a lower-case ASCII letter to upper case; anything else is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: int | str) -> int | str:
    """Map an upper-case ASCII letter to lower case; anything else is unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)