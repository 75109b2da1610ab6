"""Reading XPM pixmaps into :class:`~minipix.image.Image` objects.

Two sources are understood: a list of the pixmap's strings, and the text
of an XPM file, whose quoted strings are extracted after comments are
blanked out. Pixels whose colour is ``None`` become ``0xFF000000``.
"""

from __future__ import annotations

import os
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union

from .colors import text_to_rgb
from .image import Image, new_image
from .numbers import parse_int

_TRANSPARENT = -1
_TRANSPARENT_PIXEL = 0xFF000000
_DIRECT_MAX_CPP = 2


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> List[str]:
    """Split *text* on spaces and tabs, dropping empty words."""
    return text.replace("\t", " ").split(" ") and [
        word for word in text.replace("\t", " ").split(" ") if word
    ]


def find_substring(text: str, needle: str, length: int) -> Optional[int]:
    """Index of the first *needle* in *text*, or ``None``.

    Nothing is found when the needle is longer than *length*.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return None
    index = text.find(needle)
    return None if index == -1 else index


def find_unquoted(text: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`find_substring`, but skip matches inside double quotes."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return None
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return None


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The text keeps its length. A line comment swallows its newline.
    """
    while (begin := find_unquoted(text, "/*", len(text))) is not None:
        end = find_substring(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 4)
    while (begin := find_unquoted(text, "//", len(text))) is not None:
        end = find_substring(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 3)
    return text


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _key(line: str, start: int, cpp: int) -> str:
    return line[start:start + cpp].ljust(cpp, "\0")


def _parse(next_line: Callable[[], Optional[str]]) -> Image:
    header = next_line()
    if header is None:
        raise XpmError("missing XPM header")
    words = split_words(header)
    if len(words) < 4:
        raise XpmError(f"malformed XPM header {header!r}")
    width, height, ncolors, cpp = (parse_int(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header {header!r}")

    direct = cpp <= _DIRECT_MAX_CPP
    palette: Dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        if line is None:
            raise XpmError("missing colour definition")
        tokens = split_words(line[cpp:])
        try:
            j = tokens.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if j >= len(tokens):
            raise XpmError(f"no colour value in {line!r}")
        suffix = tokens[j + 1] if j + 1 < len(tokens) else None
        color = text_to_rgb(tokens[j], suffix)
        key = _key(line, 0, cpp)
        if direct:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = new_image(width, height)
    for y in range(height):
        line = next_line()
        if line is None:
            raise XpmError(f"missing pixel row {y}")
        for x in range(width):
            color = palette.get(_key(line, cpp * x, cpp), 0)
            if color == _TRANSPARENT:
                color = _TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap."""
    iterator = iter(lines)
    return _parse(lambda: next(iterator, None))


def xpm_text_to_image(text: str) -> Image:
    """Build an image from the text of an XPM file."""
    strings = _quoted_strings(strip_comments(text))
    return _parse(lambda: next(strings, None))


def xpm_file_to_image(path: Union[str, os.PathLike]) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return xpm_text_to_image(text)