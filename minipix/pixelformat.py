"""Conversion of 0xRRGGBB colours to the pixel layout of a visual.

A visual describes where each colour channel lives inside a pixel value
through a bit mask per channel. Deep visuals (24 bits or more) take the
colour as is. Shallower ones get each channel narrowed to its mask.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

_FULL_DEPTH = 24


def _mask_layout(mask: int) -> Tuple[int, int]:
    """Return ``(shift, bits)`` for a contiguous channel mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive integer, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


@dataclass(frozen=True)
class PixelFormat:
    """Channel positions of a true-colour visual."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    def convert(self, color: int) -> int:
        """Return the pixel value that shows *color* on this visual."""
        if self.depth >= _FULL_DEPTH:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


def pixel_format_from_masks(
    red_mask: int, green_mask: int, blue_mask: int, depth: int
) -> PixelFormat:
    """Build a :class:`PixelFormat` from the channel masks of a visual."""
    red_shift, red_bits = _mask_layout(red_mask)
    green_shift, green_bits = _mask_layout(green_mask)
    blue_shift, blue_bits = _mask_layout(blue_mask)
    return PixelFormat(
        depth=depth,
        red_shift=red_shift,
        red_bits=red_bits,
        green_shift=green_shift,
        green_bits=green_bits,
        blue_shift=blue_shift,
        blue_bits=blue_bits,
    )