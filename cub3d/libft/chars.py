"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. Predicates return ``bool``; the case converters return a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \t\n\v\f\r"))


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _between(c: Char, low: str, high: str) -> bool:
    return ord(low) <= _code(c) <= ord(high)


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    return _between(c, "A", "Z") or _between(c, "a", "z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return _between(c, "0", "9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _SPACE_CODES


def _shift_case(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if not ord(low) <= code <= ord(high):
        return c
    code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is."""
    return _shift_case(c, "A", "Z", 32)


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is."""
    return _shift_case(c, "a", "z", -32)