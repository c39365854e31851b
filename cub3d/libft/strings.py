"""String helpers: splitting, searching, comparing, trimming and copying.

Positions are returned as indices where a pointer into the string would be
returned in byte-oriented code, and ``None`` stands for "not found".
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Tuple, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c % 256)


def split(text: Optional[str], sep: Char) -> Optional[list[str]]:
    """Split ``text`` on ``sep``, dropping empty pieces.

    Runs of separators and separators at either end produce no empty
    strings. ``None`` in gives ``None`` out.
    """
    if text is None:
        return None
    return [piece for piece in text.split(_char(sep)) if piece]


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``; the NUL character matches the end."""
    ch = _char(c)
    if ch == "\0" and "\0" not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``; the NUL character matches the end."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    end = max(len(first), len(second))
    if limit is not None:
        end = min(end, limit)
    for index in range(end):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the result's sign orders them, 0 when equal.

    A non-zero result is the difference of the first differing code points,
    a missing character counting as 0.
    """
    return _compare(first, second, None)


def strncmp(first: str, second: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(first, second, n)


def strnstr(big: Optional[str], little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if big is None:
        if length == 0:
            return None
        raise TypeError("big must be a string")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strtrim(text: Optional[str], charset: Optional[str]) -> str:
    """Remove characters of ``charset`` from both ends of ``text``.

    ``None`` as ``text`` gives an empty string; ``None`` as ``charset``
    leaves ``text`` unchanged.
    """
    if text is None:
        return ""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``text`` starting at ``start``.

    A start beyond the end gives an empty string.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; ``None`` if either is ``None``."""
    if first is None or second is None:
        return None
    return first + second


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return "".join(text)


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; a copied text
    shorter than that length means truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had; when ``size`` does not exceed ``len(dst)``, ``dst`` is unchanged
    and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """New string built from ``func(index, char)`` for every character."""
    if text is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: Optional[MutableSequence[str]],
    func: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``func(index, char)`` for every item of ``text``, in place.

    A non-``None`` return value replaces the item at that index.
    """
    if text is None:
        return
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement