"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

Text = Union[str, bytes]


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _as_bytes(text: Text) -> bytes:
    return text if isinstance(text, bytes) else text.encode()


def putchar_fd(char: Text, fd: int) -> int:
    """Write one character to fd if fd is positive; return the bytes written."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    if fd <= 0:
        return 0
    return _write_all(fd, _as_bytes(char))


def putstr_fd(text: Optional[Text], fd: int) -> int:
    """Write text to fd if fd is positive and text is given; return the bytes written."""
    if fd <= 0 or text is None:
        return 0
    return _write_all(fd, _as_bytes(text))


def putendl_fd(text: Optional[Text], fd: int) -> int:
    """Write text and a newline to fd if fd is positive and text is given."""
    if fd <= 0 or text is None:
        return 0
    return _write_all(fd, _as_bytes(text) + b"\n")


def putnbr_fd(number: int, fd: int) -> int:
    """Write number in decimal to fd; return the bytes written."""
    return _write_all(fd, str(int(number)).encode())