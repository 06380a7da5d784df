"""Line-at-a-time reading from file descriptors and streams."""

from __future__ import annotations

import os
from typing import AnyStr, Generic, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 32
DEFAULT_MAX_FDS = 10240


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a descriptor or a stream.

    ``stream`` is either an integer file descriptor or an object with a
    ``read(size)`` method returning ``bytes`` or ``str``. Data is pulled in
    chunks of ``buffer_size``; whatever follows a returned line is kept for
    the next call.
    """

    def __init__(self, stream: Union[int, object], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        if isinstance(stream, int) and stream < 0:
            raise ValueError(f"invalid file descriptor: {stream}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _read_chunk(self) -> AnyStr:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)  # type: ignore[return-value]
        return self._stream.read(self._buffer_size)  # type: ignore[attr-defined]

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once nothing is left to read.

        A read error discards any data held back and is re-raised.
        """
        line = self._pending
        self._pending = None
        searched = 0
        while True:
            if line:
                newline = b"\n" if isinstance(line, (bytes, bytearray)) else "\n"
                cut = line.find(newline, searched)  # type: ignore[arg-type]
                if cut >= 0:
                    rest = line[cut + 1:]
                    self._pending = rest if rest else None
                    return line[:cut + 1]
                searched = len(line)
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return line if line else None
            line = chunk if line is None else line + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


class LineReaderPool:
    """One line reader per file descriptor, each keeping its own leftover data."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE, max_fds: int = DEFAULT_MAX_FDS) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._buffer_size = buffer_size
        self._max_fds = max_fds
        self._readers: dict[int, LineReader] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line read from ``fd``, or None at end of input."""
        if fd < 0 or fd >= self._max_fds:
            raise ValueError(f"invalid file descriptor: {fd}")
        reader = self._readers.get(fd)
        if reader is None:
            reader = self._readers[fd] = LineReader(fd, self._buffer_size)
        return reader.read_line()