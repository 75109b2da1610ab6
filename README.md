# minipix

Small, dependency-free utilities: ASCII character classes, lenient number
parsing, string helpers, chunked line reading, X11 colour names, and
in-memory pixel images decoded from XPM data.

## Installation

```
pip install minipix
```

To run the tests:

```
pip install "minipix[test]"
pytest
```

## Modules

### `minipix.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`,
`to_upper` and `to_lower`. Each takes a one-character string or an integer
code. The predicates return booleans. The case converters return the same
kind of value they were given. Only the ASCII range is treated specially.

### `minipix.numbers`

- `parse_int(text)` and `parse_long(text)` skip leading whitespace, accept
  one sign and read the digits that follow. The result wraps to a signed
  32-bit or 64-bit value. Text without digits gives `0`.
- `parse_float(text)` reads digits and an optional fractional part.
  Exponents are not recognised.
- `format_int(n)` returns the decimal string of `n`.
- `compare_numbers(s1, s2)` compares the digit text of two numbers. It skips
  the sign of both strings and the leading zeros of `s1`. A signed run of
  zeros compares equal to `"0"`.

### `minipix.strings`

`split`, `trim`, `substring`, `find_char`, `rfind_char`, `find_within`,
`compare_prefix`, `bounded_copy`, `bounded_concat` and `map_indexed`.

The searches return an index, or `None` when nothing is found. The NUL
character matches the end of the text. `bounded_copy` and `bounded_concat`
work within a fixed number of slots, one of them kept for a terminator.
Each returns a tuple of the resulting text and the length the untruncated
result would have had.

### `minipix.lines`

`LineReader(stream, buffer_size=42)` reads a text or binary stream in
chunks. `read_line()` returns each line with its newline, and `None` at the
end of the stream. The reader is also iterable. `read_lines(stream,
buffer_size)` yields every line.

### `minipix.colors`

- `lookup_color(name, suffix=None)` finds an X11 colour name, ignoring ASCII
  case. It returns a `0xRRGGBB` integer, or `None` if the name is unknown.
  When `suffix` is given, the two words are joined with a single space
  before the lookup. The name `none` gives `-1`.
- `text_to_rgb(text, suffix=None)` reads `#rrggbb` text as hexadecimal and
  looks up anything else by name. An unknown name gives `0`.

### `minipix.pixelformat`

`pixel_format_from_masks(red_mask, green_mask, blue_mask, depth)` builds a
`PixelFormat`. `PixelFormat.convert(color)` maps a `0xRRGGBB` colour to the
pixel value for that channel layout. Visuals of depth 24 or more take the
colour unchanged.

### `minipix.image`

`new_image(width, height, bits_per_pixel=32, endian=0)` returns a
zero-filled `Image`. Its rows are padded to 32 bits. An `Image` has
`width`, `height`, `bits_per_pixel`, `size_line`, `endian` and a `data`
bytearray. `put_pixel(x, y, color)` and `get_pixel(x, y)` raise
`IndexError` outside the image.

### `minipix.xpm`

- `xpm_to_image(lines)` decodes the strings of an XPM pixmap into a 32-bit
  `Image`.
- `xpm_text_to_image(text)` decodes the text of an XPM file. It blanks out
  comments and then reads the quoted strings.
- `xpm_file_to_image(path)` reads and decodes an XPM file.

Malformed data raises `XpmError`, a subclass of `ValueError`. Pixels whose
colour is `None` are stored as `0xFF000000`. The helpers `split_words`,
`find_substring`, `find_unquoted` and `strip_comments` are also available.

## Example

```python
from minipix.xpm import xpm_to_image

image = xpm_to_image([
    "2 1 2 1",
    "a c red",
    "b c #00ff00",
    "ab",
])
assert image.get_pixel(0, 0) == 0xFF0000
assert image.get_pixel(1, 0) == 0x00FF00
```

## What it does not do

Images exist only in memory. The package does not:

- open windows, draw to a display or handle keyboard and mouse events;
- write image files;
- read any image format other than XPM.