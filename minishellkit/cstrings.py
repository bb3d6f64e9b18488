"""String helpers with the exact semantics the shell relies on.

These follow classic C library behaviour: integer parsing that stops at
the first non-digit, comparisons that return the difference of the first
differing bytes, and substring helpers that never raise on out-of-range
positions.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

__all__ = [
    "atoi",
    "atoll",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strcmp",
    "strncmp",
]

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

Text = Union[str, bytes]


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a two's complement integer of *bits* width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_leading_int(text: str) -> int:
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value."""
    return _wrap(_parse_leading_int(text), 32)


def atoll(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit signed value."""
    return _wrap(_parse_leading_int(text), 64)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character of *charset* from both ends of *text*.

    Returns None when *text* is None and an unchanged copy when *charset*
    is None.
    """
    if text is None:
        return None
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* starting at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find *needle* within the first *length* characters of *haystack*.

    Returns the rest of *haystack* from the first match on, the whole of
    *haystack* for an empty needle, or None when there is no match.
    """
    if not needle:
        return haystack
    index = haystack[:max(length, 0)].find(needle)
    if index < 0:
        return None
    return haystack[index:]


def _as_bytes(value: Text) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", "surrogateescape")


def strcmp(first: Text, second: Text) -> int:
    """Compare two strings byte by byte up to a NUL or the end.

    Returns the difference of the first differing unsigned bytes, or 0.
    """
    for left, right in zip_longest(_as_bytes(first), _as_bytes(second), fillvalue=0):
        if left != right or left == 0:
            return left - right
    return 0


def strncmp(first: Text, second: Text, limit: int) -> int:
    """Compare at most *limit* bytes of two strings, like :func:`strcmp`."""
    if limit <= 0:
        return 0
    pairs = zip_longest(_as_bytes(first), _as_bytes(second), fillvalue=0)
    for count, (left, right) in enumerate(pairs, start=1):
        if left != right or left == 0 or right == 0 or count >= limit:
            return left - right
    return 0