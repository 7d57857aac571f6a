"""Integer and string conversions."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789"
_UINT64_MASK = (1 << 64) - 1


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer with 32-bit wrap-around, as C ``atoi`` does.

    Leading whitespace and one optional sign are accepted; parsing stops at the
    first non-digit. A string with no digits gives 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    negative = False
    if stripped[:1] in ("-", "+"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    number = 0
    for ch in stripped:
        if ch not in _DIGITS:
            break
        number = _wrap_int32(number * 10 + _DIGITS.index(ch))
    return _wrap_int32(-number) if negative else number


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if not isinstance(n, int):
        raise TypeError("itoa expects an int")
    return itoa_base(n, _DIGITS)


def _digits_in_base(value: int, base: str) -> str:
    if len(base) < 2:
        raise ValueError("base must have at least two symbols")
    radix = len(base)
    digits = []
    while True:
        value, rem = divmod(value, radix)
        digits.append(base[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def itoa_base(value: int, base: str) -> str:
    """Render a signed integer using the symbols of ``base`` as digits."""
    sign = "-" if value < 0 else ""
    return sign + _digits_in_base(abs(value), base)


def ulitoa_base(value: int, base: str) -> str:
    """Render ``value`` as an unsigned 64-bit integer using ``base`` as digits."""
    return _digits_in_base(value & _UINT64_MASK, base)