"""Writing characters, strings and numbers to text streams, and a small printf.

The formatter knows the conversions ``%c %s %p %d %i %u %x %X %%``.
Integer conversions use 32-bit arithmetic: ``%d``/``%i`` wrap to a signed
value, ``%u``/``%x``/``%X`` to an unsigned one. An unknown conversion
produces no output. A ``%`` followed by a space stops formatting at that
point, and :func:`printf` then reports 0 characters.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Any, Optional, TextIO, Tuple, Union

from pushswap.text import strdup

Char = Union[int, str]

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_SIGN_BIT = 1 << (_INT_BITS - 1)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def _to_signed(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value & _SIGN_BIT else value


def put_char(c: Char, stream: Optional[TextIO] = None) -> int:
    """Write one character (a str or a byte value) and return 1."""
    _target(stream).write(_as_char(c))
    return 1


def put_str(s: str, stream: Optional[TextIO] = None) -> int:
    """Write the text of ``s`` up to its terminator; return the count written."""
    text = strdup(s)
    _target(stream).write(text)
    return len(text)


def put_endl(s: str, stream: Optional[TextIO] = None) -> int:
    """Write the text of ``s`` followed by a newline; return the count written."""
    text = strdup(s) + "\n"
    _target(stream).write(text)
    return len(text)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal representation of ``n``; return the count written."""
    text = str(_as_int(n, "put_nbr"))
    _target(stream).write(text)
    return len(text)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else strdup(str(value))
    if spec == "p":
        if value is None or value == 0:
            return "(nil)"
        return f"0x{_as_int(value, '%p'):x}"
    if spec in "di":
        return str(_to_signed(_as_int(value, f"%{spec}")))
    unsigned = _as_int(value, f"%{spec}") & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    return f"{unsigned:x}" if spec == "x" else f"{unsigned:X}"


def _render(fmt: str, args: Sequence[Any]) -> Tuple[str, bool]:
    """The formatted text and whether formatting stopped at ``"% "``."""
    remaining = iter(args)
    pieces = []
    text = strdup(fmt)
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch != "%":
            pieces.append(ch)
            pos += 1
            continue
        if pos + 1 >= len(text):
            break
        spec = text[pos + 1]
        if spec == " ":
            return "".join(pieces), True
        pieces.append(_convert(spec, remaining))
        pos += 2
    return "".join(pieces), False


def format_printf(fmt: str, *args: Any) -> str:
    """The text that :func:`printf` would write for ``fmt`` and ``args``."""
    text, _ = _render(fmt, args)
    return text


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format and write; return the count written, or 0 if stopped at ``"% "``."""
    text, aborted = _render(fmt, args)
    _target(stream).write(text)
    return 0 if aborted else len(text)