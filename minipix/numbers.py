"""Lenient number parsing and formatting.

The parsers skip leading whitespace, accept one optional sign and then read
as many digits as they find, ignoring whatever follows. Nothing raises on
malformed input; text without digits reads as zero.
"""

from __future__ import annotations

from .chars import is_digit, is_space

_INT_BITS = 32
_LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a signed two's-complement integer of *bits* bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _skip_space(text: str, i: int = 0) -> int:
    while i < len(text) and is_space(text[i]):
        i += 1
    return i


def _read_sign(text: str, i: int) -> tuple[int, int]:
    if i < len(text) and text[i] in "+-":
        return (-1 if text[i] == "-" else 1), i + 1
    return 1, i


def _read_digits(text: str, i: int) -> tuple[int, int]:
    value = 0
    while i < len(text) and is_digit(text[i]):
        value = value * 10 + (ord(text[i]) - ord("0"))
        i += 1
    return value, i


def parse_int(text: str) -> int:
    """Parse a leading integer, wrapping to a signed 32-bit value."""
    sign, i = _read_sign(text, _skip_space(text))
    value, _ = _read_digits(text, i)
    return _wrap(sign * value, _INT_BITS)


def parse_long(text: str) -> int:
    """Parse a leading integer, wrapping to a signed 64-bit value."""
    sign, i = _read_sign(text, _skip_space(text))
    value, _ = _read_digits(text, i)
    return _wrap(sign * value, _LONG_BITS)


def parse_float(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    Exponents are not recognised; reading stops at the first character that
    is neither a digit nor the single decimal point.
    """
    sign, i = _read_sign(text, _skip_space(text))
    whole = 0.0
    while i < len(text) and is_digit(text[i]):
        whole = whole * 10.0 + (ord(text[i]) - ord("0"))
        i += 1
    fraction = 0.0
    if i < len(text) and text[i] == ".":
        i += 1
        divisor = 10.0
        while i < len(text) and is_digit(text[i]):
            fraction += (ord(text[i]) - ord("0")) / divisor
            divisor *= 10.0
            i += 1
    return float(sign) * (whole + fraction)


def format_int(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(int(n))


def _at(text: str, i: int) -> int:
    """Code of the character at *i*, or 0 past the end (or at a NUL)."""
    return ord(text[i]) if i < len(text) else 0


def _is_zero(text: str) -> bool:
    i = 1 if _at(text, 0) in (ord("+"), ord("-")) else 0
    if _at(text, i) != ord("0"):
        return False
    while _at(text, i) == ord("0"):
        i += 1
    return _at(text, i) == 0


def compare_numbers(s1: str, s2: str) -> int:
    """Compare the digit text of two numbers, ignoring signs.

    Leading zeros of *s1* are skipped, and any signed run of zeros equals
    ``"0"``. The result is negative, zero or positive as with a string
    comparison of the remaining characters.
    """
    zero = ord("0")
    i = 1 if _at(s1, 0) in (ord("+"), ord("-")) else 0
    j = 1 if _at(s2, 0) in (ord("+"), ord("-")) else 0
    if _at(s2, 0) == zero and _at(s2, 1) == 0 and _is_zero(s1):
        return 0
    while _at(s1, i) == zero:
        i += 1
    while _at(s1, i) != 0 and _at(s2, j) != 0 and _at(s1, i) == _at(s2, j):
        i += 1
        j += 1
    return _at(s1, i) - _at(s2, j)