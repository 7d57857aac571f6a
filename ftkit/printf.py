"""A small printf-style formatter.

Supported conversions are ``%``, ``c``, ``s``, ``p``, ``d``, ``i``, ``u``,
``x`` and ``X``. A specification may carry a leading minimum field width,
the ``-`` and ``0`` flags, a width, a ``.precision``, and ``*`` in place of
any of the numbers to take the value from the argument list. Integer
arguments are treated as 32-bit C ``int`` values.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterator, Tuple

from ftkit.convert import atoi, itoa_base, ulitoa_base

_DIGITS = "0123456789"
_NONZERO_DIGITS = "123456789"
_CONVERSIONS = "%cspdiuxX"
_NUMERIC = "diuxX"
_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_NUMBER = re.compile(r"[0-9]+")
_UINT32_MASK = 0xFFFFFFFF


@dataclass
class FormatSpec:
    """One parsed conversion specification."""

    minimum: int = 0
    flag: str = ""
    width: int = 0
    precision: int = -1
    conversion: str = ""


def _wrap_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(args: Iterator[object]) -> int:
    value = _next_arg(args)
    if not isinstance(value, int):
        raise TypeError(f"expected an int argument, got {type(value).__name__}")
    return _wrap_int32(value)


def _peek(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _read_number(fmt: str, pos: int) -> Tuple[int, int]:
    match = _NUMBER.match(fmt, pos)
    if match is None:
        return 0, pos
    return atoi(match.group()), match.end()


def parse_spec(fmt: str, pos: int, args: Iterator[object]) -> Tuple[FormatSpec, int]:
    """Parse the specification starting at ``fmt[pos]`` (just after ``%``).

    Values for ``*`` are taken from ``args``. Returns the spec and the index
    just past the conversion character.
    """
    spec = FormatSpec()

    # Leading minimum field width (right-justifying).
    ch = _peek(fmt, pos)
    if ch == "*":
        pos += 1
        spec.minimum = _int_arg(args)
    elif ch and ch in _NONZERO_DIGITS:
        spec.minimum, pos = _read_number(fmt, pos)
    if _peek(fmt, pos) == "*":
        pos += 1
    if spec.minimum < 0:
        spec.flag = "-"
        spec.width = -spec.minimum
        spec.minimum = 0

    # Flags.
    pair = fmt[pos:pos + 2]
    if pair in ("0-", "-0", "--"):
        spec.flag = "-"
        pos += 2
    elif pair == "00":
        spec.flag = "0"
        pos += 2
    elif pair[:1] == "0":
        spec.flag = "0"
        pos += 1
    elif pair[:1] == "-":
        spec.flag = "-"
        pos += 1

    # Width used by the flags.
    ch = _peek(fmt, pos)
    if ch == "*":
        pos += 1
        spec.width = _int_arg(args)
    elif ch and ch in _DIGITS:
        spec.width, pos = _read_number(fmt, pos)
    if spec.width < 0:
        spec.width = -spec.width
        if spec.flag == "0":
            spec.flag = "-"

    # Precision.
    if _peek(fmt, pos) == ".":
        pos += 1
        ch = _peek(fmt, pos)
        if ch == "*":
            pos += 1
            spec.precision = _int_arg(args)
        elif ch and ch in _DIGITS:
            spec.precision, pos = _read_number(fmt, pos)
        else:
            spec.precision = 0

    # Trailing minimum width, then the conversion character.
    ch = _peek(fmt, pos)
    if ch == "*":
        pos += 1
        spec.minimum = _int_arg(args)
    elif ch and ch in _DIGITS:
        spec.minimum, pos = _read_number(fmt, pos)

    ch = _peek(fmt, pos)
    if not ch:
        raise ValueError("incomplete format specification")
    if ch not in _CONVERSIONS:
        raise ValueError(f"unsupported conversion character {ch!r}")
    spec.conversion = ch

    if spec.flag == "0" and spec.precision >= 0 and ch in _NUMERIC:
        spec.minimum = spec.width
        spec.width = -1
        spec.flag = ""
    return spec, pos + 1


def _char_value(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects a str or int, got {type(value).__name__}")


def render_value(spec: FormatSpec, args: Iterator[object]) -> str:
    """Produce the bare text for ``spec``, taking its argument from ``args``."""
    conversion = spec.conversion
    if conversion == "%":
        return "%"
    value = _next_arg(args)
    if conversion == "c":
        return _char_value(value)
    if conversion == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str, got {type(value).__name__}")
        return value
    if conversion == "p":
        if value is None:
            value = 0
        if not isinstance(value, int):
            raise TypeError(f"%p expects an int, got {type(value).__name__}")
        return "0x" + ulitoa_base(value, _LOWER_HEX)
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    if conversion in "di":
        return itoa_base(_wrap_int32(value), _DIGITS)
    if conversion == "u":
        return itoa_base(value & _UINT32_MASK, _DIGITS)
    if conversion == "x":
        return itoa_base(value & _UINT32_MASK, _LOWER_HEX)
    if conversion == "X":
        return itoa_base(value & _UINT32_MASK, _UPPER_HEX)
    raise ValueError(f"unsupported conversion character {conversion!r}")


def _hoist_sign(text: str) -> str:
    """Turn the first '-' into '0' and put the sign at the front."""
    return "-" + text.replace("-", "0", 1)[1:]


def apply_flags(text: str, spec: FormatSpec) -> str:
    """Apply precision, flags and widths of ``spec`` to rendered ``text``."""
    conversion = spec.conversion
    negative = "-" in text
    if conversion in _NUMERIC and len(text) - negative < spec.precision:
        text = "0" * (spec.precision - len(text) + negative) + text
        if negative:
            text = _hoist_sign(text)
    elif conversion == "s" and 0 < spec.precision < len(text):
        text = text[:spec.precision]
    elif spec.precision == 0 and conversion in "cspdiuxX":
        if (text[:1] == "0" or conversion == "s") and conversion in "csdiuxX":
            text = ""
        elif conversion == "p" and text == "0x0":
            text = "0x"

    if spec.flag == "-" and spec.width > len(text):
        text += " " * (spec.width - len(text))
    elif spec.flag == "0" and len(text) < spec.width:
        leading_minus = text[:1] == "-"
        text = "0" * (spec.width - len(text)) + text
        if leading_minus:
            text = _hoist_sign(text)
    if len(text) < spec.minimum:
        text = " " * (spec.minimum - len(text)) + text
    return text


def format_string(fmt: str, *args: object) -> str:
    """Return ``fmt`` with every conversion replaced by its formatted argument."""
    arg_iter = iter(args)
    pieces = []
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1, arg_iter)
        pieces.append(apply_flags(render_value(spec, arg_iter), spec))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Format and write to standard output; return the number of characters written."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)