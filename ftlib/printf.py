"""A small printf with the conversions ``c s p d i u x X`` and ``%%``.

Any other character after ``%`` prints a single ``%`` and is itself
dropped. Integer conversions follow 32-bit C semantics: ``%d``/``%i``
wrap to a signed 32-bit value, ``%u``/``%x``/``%X`` to an unsigned one.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)
_MISSING = object()


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _uint32(value: int) -> int:
    return value % 2**32


def format_unsigned(n: int, base: str) -> str:
    """Write a non-negative integer using the characters of ``base`` as digits."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    radix = len(base)
    if radix < 2:
        raise ValueError(f"a base needs at least two digits, got {base!r}")
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def format_address(address: Optional[int]) -> str:
    """Write an address as ``0x`` followed by lower-case hex; 0 or None
    gives ``(nil)``."""
    if not address:
        return NULL_POINTER
    if isinstance(address, bool) or not isinstance(address, int):
        raise TypeError(f"expected an int address, got {type(address).__name__}")
    if address < 0:
        raise ValueError(f"an address must not be negative, got {address}")
    return "0x" + format_unsigned(address, HEX_LOWER)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _signed(value: Any) -> str:
    return str(_int32(_require_int(value, "d")))


def _unsigned_in(base: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return format_unsigned(_uint32(_require_int(value, "u")), base)

    return convert


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": format_address,
    "d": _signed,
    "i": _signed,
    "u": _unsigned_in(DECIMAL),
    "x": _unsigned_in(HEX_LOWER),
    "X": _unsigned_in(HEX_UPPER),
}


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its directives replaced by the formatted ``args``.

    Too few arguments raise TypeError; extra ones are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"the format must be a str, got {type(fmt).__name__}")
    remaining: Iterator[Any] = iter(args)

    def replace(match: re.Match) -> str:
        spec = match.group(1)
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            return "%"
        value = next(remaining, _MISSING)
        if value is _MISSING:
            raise TypeError(f"not enough arguments for %{spec}")
        return convert(value)

    return _DIRECTIVE.sub(replace, fmt)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format like :func:`format_printf`, write the text to ``stream``
    (standard output by default) and return the number of characters."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)