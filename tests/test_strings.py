import pytest

from minipix.chars import to_upper
from minipix.strings import (
    bounded_concat,
    bounded_copy,
    compare_prefix,
    find_char,
    find_within,
    map_indexed,
    rfind_char,
    split,
    substring,
    trim,
)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators_gives_nothing():
    assert split(",,,", ",") == []


@pytest.mark.parametrize("text", ["a b c", "   lead", "trail   ", " x  y   z "])
def test_split_matches_whitespace_split(text):
    assert split(text, " ") == text.split()


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_trim_both_ends():
    assert trim("xyhixy", "xy") == "hi"


def test_trim_everything():
    assert trim("aaaa", "a") == ""


def test_trim_empty_charset_keeps_text():
    assert trim("  text  ", "") == "  text  "


def test_substring_middle():
    assert substring("hello", 1, 3) == "ell"


def test_substring_clips_length():
    assert substring("hello", 2, 100) == "llo"


def test_substring_start_past_end():
    assert substring("hello", 5, 2) == ""


def test_substring_negative_start():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)


@pytest.mark.parametrize("c", ["h", "l", "o"])
def test_find_char_matches_str_find(c):
    assert find_char("hello", c) == "hello".find(c)


def test_find_char_missing():
    assert find_char("hello", "z") is None


@pytest.mark.parametrize("terminator", ["\0", 0, 1024])
def test_find_char_terminator_is_end(terminator):
    assert find_char("hello", terminator) == len("hello")


def test_find_char_accepts_code():
    assert find_char("hello", ord("e")) == "hello".find("e")


@pytest.mark.parametrize("c", ["h", "l", "o"])
def test_rfind_char_matches_str_rfind(c):
    assert rfind_char("hello", c) == "hello".rfind(c)


def test_rfind_char_missing_and_terminator():
    assert rfind_char("hello", "q") is None
    assert rfind_char("hello", 0) == len("hello")


def test_find_within_found():
    haystack = "hello world"
    assert find_within(haystack, "world", len(haystack)) == haystack.index("world")


def test_find_within_needle_past_limit():
    haystack = "hello world"
    assert find_within(haystack, "world", len(haystack) - 1) is None


def test_find_within_empty_needle():
    assert find_within("abc", "", 0) == 0


def test_find_within_negative_length():
    with pytest.raises(ValueError):
        find_within("abc", "a", -1)


def test_compare_prefix_equal_within_n():
    assert compare_prefix("abc", "abd", 2) == 0


def test_compare_prefix_differs():
    assert compare_prefix("abc", "abd", 3) == ord("c") - ord("d")


def test_compare_prefix_shorter_string():
    assert compare_prefix("ab", "abc", 5) == -ord("c")


def test_compare_prefix_zero_n():
    assert compare_prefix("abc", "xyz", 0) == 0


def test_compare_prefix_identical():
    assert compare_prefix("same", "same", 10) == 0


def test_bounded_copy_truncates():
    assert bounded_copy("hello", 3) == ("he", len("hello"))


def test_bounded_copy_fits():
    assert bounded_copy("hello", 10) == ("hello", len("hello"))


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_concat_fits():
    assert bounded_concat("ab", "cde", 10) == ("abcde", len("abcde"))


def test_bounded_concat_truncates():
    result, total = bounded_concat("ab", "cde", 4)
    assert result == "abc"
    assert len(result) == 4 - 1
    assert total == len("ab") + len("cde")


def test_bounded_concat_no_room():
    assert bounded_concat("abcd", "xy", 2) == ("abcd", 2 + len("xy"))


def test_map_indexed_with_index():
    result = map_indexed("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_map_indexed_preserves_length():
    text = "mixed Case 123"
    result = map_indexed(text, lambda i, c: to_upper(c))
    assert result == text.upper()
    assert len(result) == len(text)