"""Splitting, joining, trimming, slicing and mapping of C-style strings.

As in :mod:`pushswap.text`, an embedded NUL character ends the text.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from pushswap.text import strdup

_NUL = "\0"


def _single_char(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")
    if len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


def split(s: str, sep: str) -> list[str]:
    """The non-empty runs of ``s`` between occurrences of the character ``sep``."""
    separator = _single_char(sep, "separator")
    text = strdup(s)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strjoin(first: str, second: str) -> str:
    """The text of ``first`` followed by the text of ``second``."""
    return strdup(first) + strdup(second)


def strtrim(s: str, chars: str) -> str:
    """``s`` with every leading and trailing character found in ``chars`` removed."""
    text = strdup(s)
    trim_set = strdup(chars)
    if not trim_set:
        return text
    return text.strip(trim_set)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for every character of ``s``."""
    return "".join(
        _single_char(func(index, char), "mapped value")
        for index, char in enumerate(strdup(s))
    )


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each character of ``chars`` in place with ``func(index, char)``.

    Processing stops at the first NUL element. The same sequence is returned.
    """
    for index, char in enumerate(chars):
        if char == _NUL:
            break
        chars[index] = _single_char(func(index, char), "mapped value")
    return chars