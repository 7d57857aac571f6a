"""Line-by-line reading from raw file descriptors.

Each call returns one line without its newline, together with a flag telling
whether a newline ended it. Bytes read past a newline are kept per
descriptor and served by the next call on that descriptor.
"""

from __future__ import annotations

import os
from typing import Dict, Tuple

DEFAULT_BUFFER_SIZE = 32


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="surrogateescape")


class LineReader:
    """Reads lines from descriptors, remembering leftovers for each one."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: int) -> Tuple[str, bool]:
        """Read the next line from ``fd``.

        Returns ``(line, True)`` when a newline ended the line and
        ``(line, False)`` at end of input, where ``line`` holds whatever was
        left (possibly empty). A failed read discards the leftovers kept for
        ``fd`` and re-raises the ``OSError``.
        """
        if fd < 0:
            raise ValueError("file descriptor must not be negative")

        saved = self._pending.pop(fd, b"")
        head, newline, rest = saved.partition(b"\n")
        if newline:
            if rest:
                self._pending[fd] = rest
            return _decode(head), True

        line = bytearray(saved)
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                return _decode(bytes(line)), False
            head, newline, rest = chunk.partition(b"\n")
            line += head
            if newline:
                if rest:
                    self._pending[fd] = rest
                return _decode(bytes(line)), True


_default_reader = LineReader()


def get_next_line(fd: int) -> Tuple[str, bool]:
    """Read the next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)