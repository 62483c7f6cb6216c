"""String searching, comparison, bounded copying and splitting helpers.

Positions are returned as indexes rather than pointers, and ``None``
stands for "not found". As with NUL-terminated strings, the end of a
string can be searched for with ``"\\0"`` and compares as code 0.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Optional, TypeVar, Union

CharLike = Union[int, str]
_Seq = TypeVar("_Seq", bound=MutableSequence)

_TERMINATOR = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _TERMINATOR else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of character codes that
    differ, the end of a string counting as code 0; 0 when they match.
    """
    _check_non_negative(n=n)
    if n == 0:
        return 0
    pairs = zip_longest(s1[:n], s2[:n], fillvalue=_TERMINATOR)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first
    ``length`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_non_negative(length=length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the end mark.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is at least ``size``.
    """
    _check_non_negative(size=size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When
    ``size`` is no larger than ``dst``, ``dst`` is unchanged and the
    returned length is ``size + len(src)``.
    """
    _check_non_negative(size=size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end gives an empty string.
    """
    _check_non_negative(start=start, length=length)
    if start > len(s) or length == 0:
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between separators."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: _Seq, func: Callable[[int, object], object]) -> _Seq:
    """Call ``func(index, item)`` on each item of a mutable sequence.

    When ``func`` returns something other than None, it replaces the item
    in place. The sequence itself is returned.
    """
    for index, item in enumerate(list(s)):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement
    return s