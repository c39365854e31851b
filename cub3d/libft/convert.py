"""Conversions between decimal text and integers."""

from __future__ import annotations

_LEADING_SPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> int:
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def atoi(text: str) -> int:
    """Read a leading decimal integer, wrapping like a 32-bit signed int.

    Leading whitespace and one optional sign are skipped; reading stops at
    the first non-digit. Text with no digits gives 0.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Like :func:`atoi`, but wrapping like a 64-bit signed long."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)