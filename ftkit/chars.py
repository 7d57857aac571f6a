"""Character classification and character search in strings.

Characters may be given either as one-character strings or as integer codes.
Searches treat the string as ending at its first NUL character.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError("expected a one-character str or an int")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 31 < _code(c) < 127


def _all(text: str, predicate: Callable[[Char], bool]) -> bool:
    return all(predicate(ch) for ch in _c_view(text))


def all_alnum(text: str) -> bool:
    """True if every character of ``text`` is an ASCII letter or digit."""
    return _all(text, is_alnum)


def all_alpha(text: str) -> bool:
    """True if every character of ``text`` is an ASCII letter."""
    return _all(text, is_alpha)


def all_ascii(text: str) -> bool:
    """True if every character of ``text`` is ASCII."""
    return _all(text, is_ascii)


def all_digit(text: str) -> bool:
    """True if every character of ``text`` is an ASCII digit."""
    return _all(text, is_digit)


def all_print(text: str) -> bool:
    """True if every character of ``text`` is printable ASCII."""
    return _all(text, is_print)


def _c_view(text: str) -> str:
    return text.split("\0", 1)[0]


def _search_char(c: Char) -> Optional[str]:
    code = _code(c)
    if 0 <= code <= 0x10FFFF:
        return chr(code)
    return None


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    view = _c_view(text)
    ch = _search_char(c)
    if ch is None:
        return None
    if ch == "\0":
        return len(view)
    index = view.find(ch)
    return index if index >= 0 else None


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    view = _c_view(text)
    ch = _search_char(c)
    if ch is None:
        return None
    if ch == "\0":
        return len(view)
    index = view.rfind(ch)
    return index if index >= 0 else None