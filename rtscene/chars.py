"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _byte(c: CharLike) -> int:
    """The value as seen through a narrowing cast to one byte."""
    return _code(c) & 0xFF


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    b = _byte(c)
    return ord("A") <= b <= ord("Z") or ord("a") <= b <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _byte(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _byte(c) <= ord("~")


def to_upper(c: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= (code & 0xFF) <= ord("z"):
        code -= 32
        return chr(code) if isinstance(c, str) else code
    return c


def to_lower(c: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= (code & 0xFF) <= ord("Z"):
        code += 32
        return chr(code) if isinstance(c, str) else code
    return c


def _parse_leading_int(text: str) -> int:
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return -result if negative else result


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value."""
    return _wrap(_parse_leading_int(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit signed value."""
    return _wrap(_parse_leading_int(text), 64)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    return str(_wrap(int(n), 32))