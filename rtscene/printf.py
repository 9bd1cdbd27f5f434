"""A small printf-style formatter and helpers that write text to streams."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from .chars import itoa

HEX_UPPER_BASE = "0123456789ABCDEF"
HEX_LOWER_BASE = "0123456789abcdef"
DECIMAL_BASE = "0123456789"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF

CharLike = Union[str, int]


def convert_base(n: int, base: str) -> str:
    """Digits of the non-negative integer ``n`` written with the digit set ``base``."""
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    if n < 0:
        raise ValueError("only non-negative numbers can be converted")
    radix = len(base)
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + convert_base(address & _ULONG_MASK, HEX_LOWER_BASE)


def _conversion(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _as_char(take())
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(take())
    if spec in ("d", "i"):
        return itoa(int(take()))
    if spec == "u":
        return convert_base(int(take()) & _UINT_MASK, DECIMAL_BASE)
    if spec == "x":
        return convert_base(int(take()) & _UINT_MASK, HEX_LOWER_BASE)
    if spec == "X":
        return convert_base(int(take()) & _UINT_MASK, HEX_UPPER_BASE)
    if spec == "%":
        return "%"
    return "%" + spec


def format_printf(fmt: Optional[str], *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in ``fmt``.

    An unknown conversion is kept as written; a lone ``%`` at the end is kept.
    """
    if fmt is None:
        return ""
    out = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            out.append("%")
        else:
            out.append(_conversion(spec, values))
    return "".join(out)


def print_formatted(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default); return its length."""
    text = format_printf(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)


def put_char(c: CharLike, stream: TextIO) -> None:
    """Write one character."""
    stream.write(_as_char(c))


def put_str(text: str, stream: TextIO) -> None:
    """Write a string."""
    stream.write(text)


def put_endl(text: str, stream: TextIO) -> None:
    """Write a string followed by a newline."""
    stream.write(text + "\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    stream.write(itoa(int(n)))