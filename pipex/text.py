"""String helpers with C-string semantics.

Text ends at the first NUL character, as a C string would. Positions come
back as indices, or None where nothing was found.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[int, str]

_LONG_MAX = (1 << 63) - 1
_UINT_MASK = (1 << 32) - 1
_WHITESPACE = " \t\n\v\f\r"


def _c_str(text: str) -> str:
    if text is None:
        raise TypeError("expected a string, got None")
    cut = text.find("\0")
    return text if cut < 0 else text[:cut]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c & 0xFF)


def _as_int32(value: int) -> int:
    return ((value + (1 << 31)) & _UINT_MASK) - (1 << 31)


def parse_int(text: str) -> int:
    """Read a decimal integer the way atoi does.

    Leading whitespace and one sign are skipped; reading stops at the first
    non-digit. A value that overflows a 64-bit long gives -1, or 0 when
    negative; otherwise the result wraps to a 32-bit int.
    """
    s = _c_str(text).lstrip(_WHITESPACE)
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    value = 0
    for ch in s:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if value > _LONG_MAX:
            return 0 if negative else -1
    return _as_int32(-value if negative else value)


def int_to_str(n: int) -> str:
    """Spell an integer in decimal, with a leading '-' when negative."""
    return str(int(n))


def split(text: str, sep: Char) -> list[str]:
    """Return the non-empty words of ``text`` separated by the character ``sep``."""
    s = _c_str(text)
    separator = _char(sep)
    if separator == "\0":
        return [s] if s else []
    return [word for word in s.split(separator) if word]


def find_char(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``; a NUL finds the terminator at the end."""
    s = _c_str(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``; a NUL finds the terminator at the end."""
    s = _c_str(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _codes(s: Union[str, bytes]) -> bytes:
    if s is None:
        raise TypeError("expected a string, got None")
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    cut = data.find(b"\0")
    return data if cut < 0 else data[:cut]


def compare_n(s1: Union[str, bytes], s2: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` characters; return the byte difference at the first mismatch."""
    a = _codes(s1)
    b = _codes(s2)
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y:
            return x - y
        if x == 0:
            return 0
    return 0


def find_in(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in the first ``length`` characters."""
    n = _c_str(needle)
    if not n:
        return 0
    h = _c_str(haystack)
    if length < 0:
        raise ValueError("length must not be negative")
    index = h[:length].find(n)
    return None if index < 0 else index


def trim(text: str, chars: str) -> str:
    """Strip every character of ``chars`` from both ends of ``text``."""
    s = _c_str(text)
    return s.strip(_c_str(chars))


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    s = _c_str(text)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _c_str(first) + _c_str(second)