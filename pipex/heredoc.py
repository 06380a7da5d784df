"""Reading here-document input up to a limiter line."""

from __future__ import annotations

import io
from typing import Optional, Union

from pipex.lines import LineReader

Text = Union[str, bytes]


def is_limiter(line: Optional[Text], limiter: Text) -> bool:
    """True when ``line`` begins with ``limiter``; a missing line never matches."""
    if line is None:
        return False
    if isinstance(line, (bytes, bytearray)) and isinstance(limiter, str):
        limiter = limiter.encode("utf-8")
    elif isinstance(line, str) and isinstance(limiter, (bytes, bytearray)):
        limiter = bytes(limiter).decode("utf-8")
    return line.startswith(limiter)


def collect_heredoc(stream: object, limiter: Text) -> Text:
    """Read lines from ``stream`` until one starts with ``limiter``.

    Returns everything read before that line, newlines kept. End of input
    before the limiter returns all that was read.
    """
    collected = []
    for line in LineReader(stream):
        if is_limiter(line, limiter):
            break
        collected.append(line)
    if collected:
        return collected[0][:0].join(collected)
    return "" if isinstance(stream, io.TextIOBase) else b""