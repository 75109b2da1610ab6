import string

import pytest

from minipix.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

CODES = range(256)


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)
    assert is_alpha(chr(code)) == is_alpha(code)


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))
    assert is_alnum(code) == (chr(code) in string.ascii_letters + string.digits)


@pytest.mark.parametrize("code", CODES)
def test_is_ascii_matches_str_isascii(code):
    assert is_ascii(code) == chr(code).isascii()


def test_is_ascii_rejects_negative():
    assert is_ascii(-1) is False


@pytest.mark.parametrize("code", CODES)
def test_is_print_excludes_whitespace_controls(code):
    ch = chr(code)
    expected = ch in string.printable and (ch == " " or ch not in string.whitespace)
    assert is_print(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_is_space_matches_whitespace(code):
    assert is_space(chr(code)) == (chr(code) in string.whitespace)


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_conversion_of_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(ch) == ch.lower()
    assert to_lower(to_upper(ch)) == ch.lower()


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " é")
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_char_string_rejected(bad):
    with pytest.raises(ValueError):
        is_alpha(bad)