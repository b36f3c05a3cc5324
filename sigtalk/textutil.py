"""Character classification and string helpers with C string semantics.

Character arguments may be given either as a one-character string or as an
integer code. Positions are returned as indexes, and ``None`` stands for
"not found".
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
    "find_char",
    "rfind_char",
    "strncmp",
    "strnstr",
    "strlcat",
    "substr",
    "strjoin",
    "strtrim",
    "strmapi",
]

_CharT = TypeVar("_CharT", str, int)


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _char(c: str | int) -> str:
    """Return a one-character string for a character or a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def is_alpha(c: str | int) -> bool:
    """Tell whether *c* is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """Tell whether *c* is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """Tell whether *c* is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Tell whether *c* lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """Tell whether *c* is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: _CharT, low: str, high: str, shift: int) -> _CharT:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _CharT) -> _CharT:
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged."""
    return _convert_case(c, "a", "z", -32)


def to_lower(c: _CharT) -> _CharT:
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged."""
    return _convert_case(c, "A", "Z", 32)


def find_char(s: str, c: str | int) -> int | None:
    """Return the index of the first *c* in *s*.

    Searching for the NUL character finds the terminator at ``len(s)`` when
    the string holds no NUL of its own.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(s)
    return None


def rfind_char(s: str, c: str | int) -> int | None:
    """Return the index of the last *c* in *s*; NUL matches the terminator at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns zero when they match over that span, otherwise the difference of
    the codes of the first differing characters (a missing character counts
    as zero).
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index, (a, b) in enumerate(zip(s1[:n], s2[:n])):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    common = min(len(s1), len(s2), n)
    if common == n:
        return 0
    first = ord(s1[common]) if common < len(s1) else 0
    second = ord(s2[common]) if common < len(s2) else 0
    return first - second


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* wholly inside the first *length* characters of *haystack*.

    An empty needle is found at index 0. A length of -1 stands for one less
    than the haystack's length.
    """
    if not needle:
        return 0
    if length == -1:
        length = len(haystack) - 1
    if length < 0:
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters, NUL included.

    Returns the resulting string and the length the full result would have
    had: ``len(dst) + len(src)``, or ``size + len(src)`` when the buffer is
    no longer than *dst*, which is then left unchanged.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = len(dst)
    src_len = len(src)
    if size <= dst_len:
        return dst, src_len + size
    room = size - dst_len - 1
    return dst + src[:room], dst_len + src_len


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* from index *start*.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of *s1* and *s2*."""
    return s1 + s2


def strtrim(s: str, charset: str | None) -> str:
    """Remove every character found in *charset* from both ends of *s*.

    With no charset the string is returned as it is.
    """
    if charset is None or not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character of *s*."""
    return "".join(func(index, ch) for index, ch in enumerate(s))