"""Writing characters, strings and numbers straight to file descriptors.

Descriptor 0 is treated as "no output": nothing is written to it.
"""

from __future__ import annotations

import os
from typing import Optional, Union


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _c_text(s: str) -> str:
    cut = s.find("\0")
    return s if cut < 0 else s[:cut]


def put_char(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``; an int is written as its low byte."""
    if not fd:
        return
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``, up to its first NUL; None writes nothing."""
    if s is None or not fd:
        return
    _write_all(fd, _c_text(s).encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None or not fd:
        return
    _write_all(fd, _c_text(s).encode("utf-8") + b"\n")


def put_number(n: int, fd: int) -> None:
    """Write ``n`` in decimal, with a leading '-' when negative."""
    if fd <= 0:
        return
    _write_all(fd, str(int(n)).encode("ascii"))