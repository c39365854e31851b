"""A small ``printf`` supporting the conversions c, s, p, d, i, u, x, X and %.

Integer arguments are reduced the way C variadic arguments are: ``%d``
and ``%i`` as a 32-bit signed int, ``%u``, ``%x`` and ``%X`` as a 32-bit
unsigned int, ``%p`` as a 64-bit address.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional, Union

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _check_int(n: Any) -> int:
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return int(n)


def _unsigned(n: int, bits: int) -> int:
    return _check_int(n) & ((1 << bits) - 1)


def _signed(n: int, bits: int) -> int:
    value = _unsigned(n, bits)
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def format_int(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit signed int."""
    return str(_signed(n, 32))


def format_unsigned(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit unsigned int."""
    return str(_unsigned(n, 32))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal text of ``n`` taken as a 32-bit unsigned int, without prefix."""
    return format(_unsigned(n, 32), "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """``0x`` followed by the lower-case hex address; ``(nil)`` for a null address."""
    if address is None:
        return NULL_POINTER
    value = _unsigned(address, 64)
    if value == 0:
        return NULL_POINTER
    return "0x" + format(value, "x")


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_unsigned(value, 8))


def _format_string(value: Optional[str]) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    An unknown conversion character is dropped along with its ``%`` and
    consumes no argument; a lone ``%`` at the end is dropped.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    remaining = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        handler = _CONVERSIONS.get(spec)
        if handler is not None:
            pieces.append(handler(_next_arg(remaining, spec)))
    return "".join(pieces)


def _stdin_is_tty() -> bool:
    try:
        return os.isatty(0)
    except OSError:
        return False


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Returns -1 without writing when ``fmt`` is ``None`` or standard input
    is not a terminal.
    """
    if fmt is None or not _stdin_is_tty():
        return -1
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)