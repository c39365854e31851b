"""Byte-buffer helpers: filling, copying, searching and comparing.

Buffers are ``bytes`` for read-only operations and ``bytearray`` (or any
mutable sequence of byte values) for operations that write. Byte values
given as integers are reduced modulo 256, the way a C ``char`` cast does.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Optional

ALLOCATION_LIMIT = 4294967295


def _check_span(buffer: Sequence[int], n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(buffer):
        raise ValueError(f"n ({n}) exceeds the length of {name} ({len(buffer)})")


def bzero(buffer: MutableSequence[int], n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> Optional[bytearray]:
    """A zero-filled buffer of ``count * size`` bytes.

    ``None`` when the total exceeds 4294967295 bytes or either argument is
    negative; a zero count or size gives an empty buffer.
    """
    if count < 0 or size < 0:
        return None
    total = count * size
    if total > ALLOCATION_LIMIT:
        return None
    return bytearray(total)


def memchr(buffer: Sequence[int], c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``; ``None`` if absent."""
    _check_span(buffer, n)
    target = c % 256
    return next((index for index, byte in enumerate(buffer[:n]) if byte == target), None)


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes; the difference of the first unequal pair, else 0."""
    _check_span(first, n, "first")
    _check_span(second, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(
    dest: Optional[MutableSequence[int]],
    src: Optional[Sequence[int]],
    n: int,
) -> Optional[MutableSequence[int]]:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``.

    With both buffers ``None`` the result is ``None``.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    _check_span(dest, n, "dest")
    _check_span(src, n, "src")
    dest[:n] = src[:n]
    return dest


def memmove(
    buffer: MutableSequence[int],
    dest_offset: int,
    src_offset: int,
    n: int,
) -> MutableSequence[int]:
    """Copy ``n`` bytes inside ``buffer`` from ``src_offset`` to ``dest_offset``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    if n < 0 or dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets and n must not be negative")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    chunk = bytes(buffer[src_offset:src_offset + n])
    buffer[dest_offset:dest_offset + n] = chunk
    return buffer


def memset(buffer: MutableSequence[int], c: int, n: int) -> MutableSequence[int]:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` and return ``buffer``."""
    _check_span(buffer, n)
    buffer[:n] = bytes([c % 256]) * n
    return buffer