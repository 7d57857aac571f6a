"""Byte-buffer helpers modelled on the classic C memory routines.

Buffers are mutable byte sequences (``bytearray`` or writable ``memoryview``);
positions are returned as indices instead of pointers.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError("length exceeds buffer size")


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (as an unsigned byte)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length(n, data)
    target = c & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memccpy(dest: Buffer, src: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the index in ``dest`` just past the copied ``c``, or None if it
    was not found within ``n`` bytes.
    """
    _check_length(n, dest, src)
    target = c & 0xFF
    for i, byte in enumerate(bytes(src[:n])):
        dest[i] = byte
        if byte == target:
            return i + 1
    return None


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes between possibly overlapping buffers and return ``dest``."""
    _check_length(n, dest, src)
    snapshot = bytes(src[:n])
    dest[:n] = snapshot
    return dest


def realloc(text: Optional[str], extra: int) -> Optional[str]:
    """Return a copy of ``text`` sized for ``extra`` more characters.

    A negative ``extra`` truncates the copy. ``None`` yields ``None``.
    """
    if text is None:
        return None
    return text[: max(len(text) + extra, 0)]