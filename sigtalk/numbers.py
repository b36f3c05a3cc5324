"""Integer parsing and formatting helpers with C-style integer semantics."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "atoi",
    "atol",
    "itoa",
    "ltoa",
    "uitoa",
    "count_digits",
    "count_base",
    "check_base",
    "format_base",
    "absolute",
    "args_to_ints",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce *value* to a two's-complement integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str) -> int:
    """Skip leading whitespace, read an optional sign and a run of digits."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse the leading integer of *text* as a 32-bit signed int.

    Leading whitespace is skipped, one sign is accepted, parsing stops at the
    first non-digit, and text without digits yields 0.
    """
    return _wrap_signed(_parse(text), 32)


def atol(text: str) -> int:
    """Parse the leading integer of *text* as a 64-bit signed long."""
    return _wrap_signed(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*, with a leading '-' if negative."""
    return str(n)


def ltoa(n: int) -> str:
    """Return the decimal digits of the magnitude of *n*; the sign is dropped."""
    return str(abs(n))


def uitoa(n: int) -> str:
    """Return the decimal representation of *n* taken as a 32-bit unsigned int."""
    return str(n & 0xFFFFFFFF)


def count_digits(n: int) -> int:
    """Return how many decimal digits the magnitude of *n* has (0 has one)."""
    return len(str(abs(n)))


def count_base(number: int, base: str) -> int:
    """Return how many digits *number* needs in a base of ``len(base)`` symbols.

    Zero needs no digits at all. A base of fewer than two symbols is rejected.
    """
    radix = len(base)
    if radix < 2:
        raise ValueError("base must contain at least two symbols")
    if number < 0:
        raise ValueError("number must not be negative")
    count = 0
    while number:
        number //= radix
        count += 1
    return count


def check_base(base: str) -> bool:
    """Tell whether *base* is a usable digit set.

    A valid base has at least two symbols, no repeated symbol, and neither
    '+' nor '-'.
    """
    if len(base) < 2:
        return False
    if "+" in base or "-" in base:
        return False
    return len(set(base)) == len(base)


def format_base(number: int, base: str) -> str:
    """Write *number*, taken as a 64-bit unsigned value, using the symbols of *base*."""
    if not check_base(base):
        raise ValueError(f"invalid base: {base!r}")
    radix = len(base)
    number &= 0xFFFFFFFFFFFFFFFF
    symbols = []
    while True:
        number, remainder = divmod(number, radix)
        symbols.append(base[remainder])
        if not number:
            break
    return "".join(reversed(symbols))


def absolute(n: int) -> int:
    """Return the magnitude of *n*."""
    return abs(n)


def args_to_ints(args: Iterable[str]) -> list[int]:
    """Convert each argument (those after the program name) with :func:`atoi`."""
    return [atoi(arg) for arg in args]