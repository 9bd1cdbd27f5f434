"""String helpers: duplication, joining, splitting, trimming, searching and comparison."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[str, int]
T = TypeVar("T")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c))


def _code_at(text: str, index: int) -> int:
    """Code of the character at ``index``, or 0 past the end of the text."""
    return ord(text[index]) if index < len(text) else 0


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strndup(text: str, length: int) -> str:
    """A copy of at most ``length`` leading characters of ``text``."""
    _check_non_negative("length", length)
    return text[:length]


def strjoin(first: str, second: str) -> str:
    """The concatenation of ``first`` and ``second``."""
    return first + second


def split(text: str, sep: CharLike) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of the character ``sep``."""
    return [word for word in text.split(_char(sep)) if word]


def strtrim(text: str, charset: str) -> str:
    """``text`` with every leading and trailing character found in ``charset`` removed."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty when ``start`` is past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None."""
    if not needle:
        return 0
    _check_non_negative("length", length)
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; the terminator ``"\\0"`` is found at the end."""
    ch = _char(c)
    if ch == "\0":
        index = text.find(ch)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; the terminator ``"\\0"`` is found at the end."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strcmp(first: str, second: str) -> int:
    """Difference of the first unequal character codes, the end of a string counting as 0."""
    index = 0
    while index < len(first) and _code_at(first, index) == _code_at(second, index):
        index += 1
    return _code_at(first, index) - _code_at(second, index)


def strncmp(first: str, second: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_non_negative("n", n)
    for index in range(min(n, max(len(first), len(second)))):
        a, b = _code_at(first, index), _code_at(second, index)
        if a != b:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots, one kept for the terminator.

    Returns the resulting text and the length the full result would have had.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    return dst + src[:size - len(dst) - 1], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` on each item, storing any non-None result in place."""
    for index, item in enumerate(list(text)):
        result = func(index, item)
        if result is not None:
            text[index] = result