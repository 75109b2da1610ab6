"""In-memory pixel images in the packed ZPixmap layout.

Rows are padded to a multiple of 32 bits. Each pixel occupies
``bits_per_pixel // 8`` bytes, stored least significant byte first when
``endian`` is 0 and most significant byte first when it is 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field

_ROW_PAD_BITS = 32
_VALID_DEPTHS = (8, 16, 24, 32)


@dataclass
class Image:
    """A block of pixels and the layout needed to address them."""

    width: int
    height: int
    bits_per_pixel: int
    size_line: int
    endian: int
    data: bytearray = field(repr=False)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store *color* at column *x*, row *y*, keeping only the bytes that fit."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value at column *x*, row *y*."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._byteorder)


def new_image(width: int, height: int, bits_per_pixel: int = 32, endian: int = 0) -> Image:
    """Create a zero-filled image of the given size and layout."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if bits_per_pixel not in _VALID_DEPTHS:
        raise ValueError(f"unsupported bits_per_pixel {bits_per_pixel!r}")
    if endian not in (0, 1):
        raise ValueError("endian must be 0 (little) or 1 (big)")
    row_bits = width * bits_per_pixel
    size_line = (row_bits + _ROW_PAD_BITS - 1) // _ROW_PAD_BITS * (_ROW_PAD_BITS // 8)
    return Image(
        width=width,
        height=height,
        bits_per_pixel=bits_per_pixel,
        size_line=size_line,
        endian=endian,
        data=bytearray(size_line * height),
    )