import pytest

from minipix.colors import lookup_color
from minipix.xpm import (
    XpmError,
    find_substring,
    find_unquoted,
    split_words,
    strip_comments,
    xpm_file_to_image,
    xpm_text_to_image,
    xpm_to_image,
)

SIMPLE = ["2 2 2 1", ". c #FF0000", "# c blue", ".#", "#."]

FILE_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c #FF0000",
"# c blue",
// pixels
".#",
"#."
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("a  b\tc ") == ["a", "b", "c"]
    assert split_words("a\nb c") == ["a\nb", "c"]
    assert split_words("   ") == []


def test_find_substring():
    text = "hello world"
    assert find_substring(text, "world", len(text)) == text.index("world")
    assert find_substring(text, "xyz", len(text)) is None
    assert find_substring(text, "world", 3) is None


def test_find_unquoted_skips_quoted():
    text = '"/*" /*'
    assert find_unquoted(text, "/*", len(text)) == text.rindex("/*")
    assert find_unquoted('"/*"', "/*", 4) is None


def test_strip_block_comment():
    text = "a /* x */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["a", "b"]
    assert "/*" not in result


def test_strip_line_comment_swallows_newline():
    text = "x // c\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.split() == ["x", "y"]


def test_strip_keeps_quoted_comment():
    text = '"/* keep */"'
    assert strip_comments(text) == text


def _check_simple(img):
    assert (img.width, img.height) == (2, 2)
    blue = lookup_color("blue")
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(1, 0) == blue
    assert img.get_pixel(0, 1) == blue
    assert img.get_pixel(1, 1) == 0xFF0000


def test_xpm_to_image():
    _check_simple(xpm_to_image(SIMPLE))


def test_xpm_text_to_image():
    _check_simple(xpm_text_to_image(FILE_TEXT))


def test_xpm_file_to_image(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(FILE_TEXT)
    _check_simple(xpm_file_to_image(path))


def test_transparent_color():
    img = xpm_to_image(["1 1 1 1", "  c None", " "])
    assert img.get_pixel(0, 0) == 0xFF000000


def test_two_word_color_name():
    img = xpm_to_image(["1 1 1 1", ". c ghost white", "."])
    assert img.get_pixel(0, 0) == lookup_color("ghost white")


def test_unknown_pixel_key_is_black():
    img = xpm_to_image(["2 1 1 1", ". c #FFFFFF", ".?"])
    assert img.get_pixel(0, 0) == 0xFFFFFF
    assert img.get_pixel(1, 0) == 0


def test_multi_char_keys():
    img = xpm_to_image(["2 1 2 3", "aaa c #00FF00", "bbb c #0000FF", "bbbaaa"])
    assert img.get_pixel(0, 0) == 0x0000FF
    assert img.get_pixel(1, 0) == 0x00FF00


def test_duplicate_keys_short_codes_last_wins():
    img = xpm_to_image(["1 1 2 1", ". c #00FF00", ". c #0000FF", "."])
    assert img.get_pixel(0, 0) == 0x0000FF


def test_duplicate_keys_long_codes_first_wins():
    img = xpm_to_image(["1 1 2 3", "abc c #00FF00", "abc c #0000FF", "abc"])
    assert img.get_pixel(0, 0) == 0x00FF00


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", ". c red"],
        ["1 1 1 1", ". s red", "."],
        ["1 1 1 1", ". c", "."],
        ["1 1 1 1"],
        ["1 2 1 1", ". c red", "."],
    ],
)
def test_malformed_xpm(lines):
    with pytest.raises(XpmError):
        xpm_to_image(lines)


def test_text_without_strings():
    with pytest.raises(XpmError):
        xpm_text_to_image("/* XPM */ nothing here")