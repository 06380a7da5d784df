"""Byte-buffer helpers: fill, search, compare, copy and move."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(buf: Buffer, n: int, start: int = 0) -> None:
    if n < 0 or start < 0:
        raise ValueError("lengths and offsets must not be negative")
    if start + n > len(buf):
        raise ValueError("range reaches past the end of the buffer")


def zero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    mem_set(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_find(data: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_length(data, n)
    target = value & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index < 0 else index


def mem_compare(a: Optional[Buffer], b: Optional[Buffer], n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair.

    Two missing buffers compare equal; one missing buffer compares as -1.
    """
    if a is None and b is None:
        return 0
    if a is None or b is None:
        return -1
    _check_length(a, n)
    _check_length(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def mem_copy(dst: Optional[bytearray], src: Optional[Buffer], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes of ``src`` to the start of ``dst`` and return ``dst``."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both buffers are needed to copy")
    _check_length(dst, n)
    _check_length(src, n)
    dst[:n] = bytes(src[:n])
    return dst


def mem_move(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``; overlap is safe."""
    _check_length(buf, n, src)
    _check_length(buf, n, dst)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def mem_set(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _check_length(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf