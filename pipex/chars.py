"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _in_range(c: Char, low: str, high: str) -> bool:
    return ord(low) <= _code(c) <= ord(high)


def isalpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    return _in_range(c, "a", "z") or _in_range(c, "A", "Z")


def isdigit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return _in_range(c, "0", "9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _shift_case(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    return _shift_case(c, "a", "z", -32)


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    return _shift_case(c, "A", "Z", 32)