"""Parsing and validation of the numbers, vectors and colors in scene lines."""

from __future__ import annotations

import math

from .scene import Vec
from .strtools import split

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_double(text: str) -> float:
    """Read a leading decimal number with optional sign and fraction; stops at the first other character."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0.0
    divisor = 1.0
    while pos < length and _is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    if pos < length and text[pos] == ".":
        pos += 1
    while pos < length and _is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        divisor *= 10.0
        pos += 1
    return (result / divisor) * sign


def is_invalid_double(text: str) -> bool:
    """True unless ``text`` is an optional sign, digits, and optionally a dot followed by digits."""
    if not text:
        return True
    body = text[1:] if text[0] in "+-" else text
    if not body:
        return True
    has_dot = has_before = has_after = False
    for ch in body:
        if _is_digit(ch) and not has_dot:
            has_before = True
        elif ch == "." and not has_dot:
            has_dot = True
        elif _is_digit(ch) and has_dot:
            has_after = True
        else:
            return True
    if not has_before:
        return True
    return has_dot and not has_after


def is_invalid_vector(text: str) -> bool:
    """True unless ``text`` splits on commas into exactly three valid numbers."""
    parts = split(text, ",")
    if len(parts) != 3:
        return True
    return any(not part or is_invalid_double(part) for part in parts)


def has_invalid_input(token: str) -> bool:
    """Validate a token as a number (no commas) or a vector (two commas)."""
    commas = token.count(",")
    if commas == 0:
        return is_invalid_double(token)
    if commas == 2:
        return is_invalid_vector(token)
    return True


def _three_numbers(text: str, what: str) -> tuple:
    parts = split(text, ",")
    if len(parts) != 3:
        raise ValueError(f"{what} needs three comma-separated components: {text!r}")
    return tuple(parse_double(part) for part in parts)


def parse_vector(text: str) -> Vec:
    """A vector from three comma-separated numbers."""
    x, y, z = _three_numbers(text, "vector")
    return Vec(x, y, z)


def parse_color(text: str) -> Vec:
    """An RGB color from three comma-separated whole numbers in 0..255."""
    components = _three_numbers(text, "color")
    for value in components:
        if not math.isfinite(value) or value < 0 or value > 255 or value != int(value):
            raise ValueError(f"color components must be whole numbers in [0,255]: {text!r}")
    r, g, b = (float(int(value)) for value in components)
    return Vec(r, g, b)