"""Helpers for NUL-terminated strings held in byte buffers.

A buffer's string ends at its first NUL byte, or at the end of the buffer
when it holds none. ``str`` values are accepted where a string is only
read, and are treated the same way.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, TypeVar, Union

Text = Union[bytes, bytearray, memoryview, str]
T = TypeVar("T")


def _c_bytes(buf: Text) -> bytes:
    if buf is None:
        raise TypeError("expected a string, got None")
    data = buf.encode("utf-8") if isinstance(buf, str) else bytes(buf)
    cut = data.find(b"\0")
    return data if cut < 0 else data[:cut]


def c_length(buf: Text) -> int:
    """Length of the string held in ``buf``, up to its first NUL."""
    if isinstance(buf, str):
        cut = buf.find("\0")
        return len(buf) if cut < 0 else cut
    return len(_c_bytes(buf))


def _check_size(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError("size is larger than the destination buffer")


def bounded_copy(dst: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes with the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was cut short.
    """
    data = _c_bytes(src)
    if size == 0:
        return len(data)
    _check_size(dst, size)
    copied = min(len(data), size - 1)
    dst[:copied] = data[:copied]
    dst[copied] = 0
    return len(data)


def bounded_concat(dst: Optional[bytearray], src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the total within ``size`` bytes.

    Returns the length the full string would have had: the length of the
    string already in ``dst`` (counted no further than ``size``) plus the
    length of ``src``.
    """
    data = _c_bytes(src)
    if dst is None:
        if size == 0:
            return len(data)
        raise TypeError("a destination buffer is needed")
    _check_size(dst, size)
    end = dst.find(b"\0", 0, size)
    dst_len = size if end < 0 else end
    position = dst_len
    if size != 0 and position < size - 1:
        room = size - 1 - position
        piece = data[:room]
        dst[position:position + len(piece)] = piece
        position += len(piece)
    if position > dst_len:
        dst[position] = 0
    return dst_len + len(data)


def duplicate(buf: Text) -> Union[bytes, str]:
    """A fresh copy of the string held in ``buf``; ``str`` in, ``str`` out."""
    if isinstance(buf, str):
        cut = buf.find("\0")
        return buf if cut < 0 else buf[:cut]
    return _c_bytes(buf)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character of ``text``."""
    if text is None or func is None:
        raise TypeError("both a string and a function are needed")
    cut = text.find("\0")
    s = text if cut < 0 else text[:cut]
    return "".join(func(i, ch) for i, ch in enumerate(s))


def _is_terminator(value: object) -> bool:
    return value == 0 or value == "\0"


def iterate_indexed(chars: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` for each item before the first NUL.

    A value returned by ``func`` replaces the item in place; None leaves it.
    """
    if chars is None or func is None:
        raise TypeError("both a sequence and a function are needed")
    for i, item in enumerate(chars):
        if _is_terminator(item):
            break
        result = func(i, item)
        if result is not None:
            chars[i] = result