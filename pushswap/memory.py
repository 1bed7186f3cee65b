"""Byte-buffer operations on bytearray and bytes objects."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes; 0 by 0 gives one byte."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 and size == 0:
        count = size = 1
    return bytearray(count * size)


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (taken modulo 256) among the first ``n``."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if none differ."""
    _check_count(n, len(first), len(second))
    for left, right in zip(first[:n], second[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``; overlap is safe."""
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` modulo 256."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer