"""Raw byte-buffer operations on ``bytearray`` objects."""

from __future__ import annotations

from typing import Union

Bytes = Union[bytes, bytearray, memoryview]


def _check(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError("count exceeds buffer size")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes with the low byte of ``value``."""
    _check(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes."""
    memset(buffer, 0, n)


def memcpy(dst: bytearray | None, src: Bytes | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes of ``src`` to the start of ``dst``; returns ``dst``."""
    if dst is None and src is None:
        return None
    if dst is src:
        return dst
    if dst is None or src is None:
        raise ValueError("both buffers are required")
    _check(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst``; overlap is safe."""
    if dst < 0 or src < 0 or n < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dst, src) + n > len(buffer):
        raise ValueError("range exceeds buffer size")
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: Bytes, c: int, n: int) -> int | None:
    """Offset of the first byte equal to the low byte of ``c`` among the first ``n``."""
    _check(n, data)
    pos = bytes(data[:n]).find(c & 0xFF)
    return None if pos < 0 else pos


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, else 0."""
    _check(n, a, b)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)