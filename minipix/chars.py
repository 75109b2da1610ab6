"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code.
Predicates return booleans. The case converters return a value of the same
kind they were given.
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
    return int(c)


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Return True for a printable ASCII character, space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def is_space(c: Char) -> bool:
    """Return True for space, tab, newline, vertical tab, form feed or CR."""
    return _code(c) in _SPACE_CODES


def to_upper(c: Char) -> Char:
    """Turn an ASCII lower-case letter into upper case; leave others alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code ^= 32
    return _same_kind(c, code)


def to_lower(c: Char) -> Char:
    """Turn an ASCII upper-case letter into lower case; leave others alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code ^= 32
    return _same_kind(c, code)