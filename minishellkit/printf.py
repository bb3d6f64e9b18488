"""A small formatted-output routine with a fixed set of conversions.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. Integers are treated as 32-bit values the way
a C ``int`` or ``unsigned int`` would be. Pointers are 64-bit. An unknown
conversion character prints nothing and consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

__all__ = ["format_printf", "printf"]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, bytes):
        return value.decode("utf-8", "surrogateescape")
    return str(value)


def _signed(value: Any) -> str:
    return str(_to_int32(int(value)))


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "X")


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            argument = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format %{spec}") from None
        yield convert(argument)


def format_printf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)