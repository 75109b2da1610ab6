"""String helpers: splitting, trimming, searching and bounded copies.

All functions take and return ordinary ``str`` values. Searches return an
index into the text, or ``None`` when nothing is found.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

Char = Union[str, int]

# Codes that make the character searches report the end of the text.
_TERMINATOR_CODES = (0, 1024)


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _at(text: str, i: int) -> int:
    """Code of the character at *i*, or 0 past the end."""
    return ord(text[i]) if i < len(text) else 0


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    return text.strip(charset) if charset else text


def substring(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_char(text: str, char: Char) -> Optional[int]:
    """Index of the first occurrence of *char* in *text*.

    The NUL character (or code 1024) matches the end of the text, so its
    index is ``len(text)``. Integer codes are compared on their low byte.
    """
    code = _code(char)
    if code in _TERMINATOR_CODES:
        return len(text)
    target = code & 0xFF
    return next((i for i, ch in enumerate(text) if ord(ch) == target), None)


def rfind_char(text: str, char: Char) -> Optional[int]:
    """Index of the last occurrence of *char* in *text*.

    The NUL character (or code 1024) matches the end of the text.
    """
    code = _code(char)
    if code in _TERMINATOR_CODES:
        return len(text)
    target = code & 0xFF
    found = None
    for i, ch in enumerate(text):
        if ord(ch) == target:
            found = i
    return found


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* wholly inside the first *length* characters of *haystack*.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first differing character codes, a shorter
    string comparing as if followed by code 0; zero when they agree.
    """
    for i in range(max(n, 0)):
        a, b = _at(s1, i), _at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, one kept for the terminator.

    Returns the copied text and the full length of *src*, so truncation can
    be detected by comparing that length with *size*.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* slots.

    Returns the resulting text and the length the untruncated result would
    have had. When *size* does not exceed the length of *dst*, nothing is
    appended and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = len(dst)
    if size <= used:
        return dst, size + len(src)
    room = size - 1 - used
    return dst + src[:room], used + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))