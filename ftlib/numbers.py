"""Lenient number parsing and integer formatting."""

from __future__ import annotations

import re

_LEADING_SPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")


def _prefix(text: str) -> tuple[int, str] | None:
    """Skip leading whitespace and one sign.

    Return the sign and the remaining text, or None when a sign is not
    directly followed by a digit.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if not rest[1:2].isascii() or not rest[1:2].isdigit():
            return None
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring whatever follows it.

    Leading whitespace is skipped and one ``+`` or ``-`` is allowed, but
    only when a digit comes straight after it. Text without a number
    gives 0.
    """
    parsed = _prefix(text)
    if parsed is None:
        return 0
    sign, rest = parsed
    digits = _DIGITS.match(rest).group()
    return sign * int(digits) if digits else 0


def atof(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    Follows the same rules as :func:`atoi` for whitespace and sign; a
    ``.`` followed by digits may come after the integer part. There is
    no exponent notation. Text without a number gives 0.0.
    """
    parsed = _prefix(text)
    if parsed is None:
        return 0.0
    sign, rest = parsed
    whole = _DIGITS.match(rest).group()
    value = 0.0
    for digit in whole:
        value = value * 10 + int(digit)
    rest = rest[len(whole):]
    if rest.startswith("."):
        fraction = 0.1
        for digit in _DIGITS.match(rest, 1).group():
            value += int(digit) * fraction
            fraction *= 0.1
    return value * sign


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)