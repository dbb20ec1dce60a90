"""String helpers: length, search, comparison, slicing, splitting and number conversion."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

Char = Union[str, int]

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_LONG_MAX = 9223372036854775807
_LONG_MIN_MAGNITUDE = 9223372036854775808


def _char(c: Char) -> str:
    """Return c as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied (possibly truncated) string and the length of src,
    which is the length the copy would have needed.
    """
    _check_size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting string and the length it tried to create. When size
    is smaller than dst, dst is left unchanged and the result is len(src) + size.
    """
    _check_size(size, "size")
    if size < len(dst):
        return dst, len(src) + size
    room = max(0, size - len(dst) - 1)
    return dst + src[:room], len(dst) + len(src)


def strchr(text: str, char: Char) -> Optional[int]:
    """Return the index of the first occurrence of char in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    c = _char(char)
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, char: Char) -> Optional[int]:
    """Return the index of the last occurrence of char in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    c = _char(char)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch, or 0."""
    _check_size(n, "n")
    pairs = islice(zip_longest(first, second, fillvalue="\0"), n)
    for a, b in pairs:
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where needle starts within the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of text."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text starting at start.

    A start past the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return first followed by second."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove the characters of charset from both ends of text."""
    return text.strip(charset)


def split(text: str, delim: Char) -> list[str]:
    """Split text on delim, dropping empty pieces."""
    separator = _char(delim)
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of func(index, char) for every character of text."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call func(index, char) on every character of a mutable sequence, in place.

    A non-None return value replaces the character at that index.
    """
    for index, char in enumerate(list(text)):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C int conversion does.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit, magnitudes reaching the 64-bit limits give -1 (positive) or 0
    (negative), and the result wraps to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    number = 0
    for char in rest:
        if char not in _DIGITS:
            break
        number = (number * 10 + ord(char) - ord("0")) % (1 << 64)
    if not negative and number >= _LONG_MAX:
        return -1
    if negative and number >= _LONG_MIN_MAGNITUDE:
        return 0
    return _to_int32(-number if negative else number)


def itoa(number: int) -> str:
    """Return the decimal representation of number."""
    return str(int(number))