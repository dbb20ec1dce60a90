"""Byte-buffer operations on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero, in place."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first of the first n bytes equal to value, or None.

    Only the low eight bits of value are compared.
    """
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy n bytes from the start of src to the start of dest; return dest."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buffer from offset src to offset dest; overlap is safe.

    Returns the buffer.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if max(dest, src) + n > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low eight bits of value; return it."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer