"""A small printf: a fixed set of conversions written to a file descriptor."""

from __future__ import annotations

import os
from typing import Any, Iterator, Sequence

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

NULL_STRING = "(null)"
NULL_POINTER = "0x0"
UNKNOWN_CONVERSION = "[error: unknown conversion type character]"

_STDERR = 2
_POINTER_MASK = (1 << 64) - 1
_UINT_MASK = (1 << 32) - 1


def _as_int32(value: int) -> int:
    return ((value + (1 << 31)) & _UINT_MASK) - (1 << 31)


def _as_uint32(value: int) -> int:
    return value & _UINT_MASK


def to_base(number: int, digits: str) -> str:
    """Spell ``number`` with ``digits`` as the digit set; negatives get a leading '-'."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        return "-" + to_base(-number, digits)
    out = []
    while True:
        number, rest = divmod(number, base)
        out.append(digits[rest])
        if number == 0:
            break
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return NULL_STRING if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return NULL_POINTER
    return "0x" + to_base(address, HEX_LOWER)


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: to_base(_as_int32(int(v)), DECIMAL),
    "i": lambda v: to_base(_as_int32(int(v)), DECIMAL),
    "u": lambda v: to_base(_as_uint32(int(v)), DECIMAL),
    "x": lambda v: to_base(_as_uint32(int(v)), HEX_LOWER),
    "X": lambda v: to_base(_as_uint32(int(v)), HEX_UPPER),
}


def _pieces(fmt: str, args: Sequence[Any]) -> Iterator[tuple[str, bool]]:
    """Yield (text, is_error) pieces; an error piece marks an unknown conversion."""
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch, False
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%", False
        elif spec in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            yield _CONVERSIONS[spec](value), False
        else:
            yield UNKNOWN_CONVERSION, True


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with the conversions c, s, p, d, i, u, x, X and %.

    An unknown conversion character raises ValueError.
    """
    out = []
    for text, is_error in _pieces(fmt, args):
        if is_error:
            raise ValueError("unknown conversion type character")
        out.append(text)
    return "".join(out)


def fd_printf(fd: int, fmt: str, *args: Any) -> int:
    """Write the rendered ``fmt`` to ``fd`` and return the number of bytes counted.

    An unknown conversion writes an error notice to standard error instead,
    and its length is counted like any other output.
    """
    count = 0
    for text, is_error in _pieces(fmt, args):
        data = text.encode("utf-8")
        os.write(_STDERR if is_error else fd, data)
        count += len(data)
    return count