"""String searching, comparison and size-bounded copying.

Strings follow C-string rules: an embedded NUL character ends the text,
and searching for NUL finds the terminating position.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

Char = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    """The part of ``s`` before the first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char_code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c & 0xFF


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c``; NUL gives the string's length."""
    text = _cstr(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    return next((i for i, ch in enumerate(text) if ord(ch) == code), None)


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c``; NUL gives the string's length."""
    text = _cstr(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    return next(
        (i for i in reversed(range(len(text))) if ord(text[i]) == code), None
    )


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering."""
    _check_size(n, "n")
    left_text, right_text = _cstr(first), _cstr(second)
    for i in range(n):
        left = ord(left_text[i]) if i < len(left_text) else 0
        right = ord(right_text[i]) if i < len(right_text) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in ``big`` lying wholly within the first ``length`` characters."""
    _check_size(length, "length")
    haystack, needle = _cstr(big), _cstr(little)
    if not needle:
        return 0
    index = haystack.find(needle)
    if index < 0 or index + len(needle) > length:
        return None
    return index


def strdup(s: str) -> str:
    """A copy of the text up to its terminator."""
    return _cstr(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``, so truncation
    happened when the length is at least ``size``.
    """
    _check_size(size)
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When the
    buffer is no longer than ``dst``, ``dst`` is left as it is and the
    length reported is ``size`` plus the length of ``src``.
    """
    _check_size(size)
    head, tail = _cstr(dst), _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)