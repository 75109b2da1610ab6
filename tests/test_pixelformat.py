import pytest

from minipix.pixelformat import PixelFormat, pixel_format_from_masks

RGB565 = (0xF800, 0x07E0, 0x001F)
RGB555 = (0x7C00, 0x03E0, 0x001F)


@pytest.mark.parametrize("masks", [RGB565, RGB555])
def test_layout_reconstructs_masks(masks):
    fmt = pixel_format_from_masks(*masks, 16)
    assert ((1 << fmt.red_bits) - 1) << fmt.red_shift == masks[0]
    assert ((1 << fmt.green_bits) - 1) << fmt.green_shift == masks[1]
    assert ((1 << fmt.blue_bits) - 1) << fmt.blue_shift == masks[2]


def test_rgb565_red_position():
    fmt = pixel_format_from_masks(*RGB565, 16)
    assert (fmt.red_shift, fmt.red_bits) == (11, 5)


def test_deep_visual_keeps_color():
    fmt = pixel_format_from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)
    assert fmt.convert(0x123456) == 0x123456


@pytest.mark.parametrize("masks", [RGB565, RGB555])
def test_primary_colors_fill_their_masks(masks):
    fmt = pixel_format_from_masks(*masks, 16)
    assert fmt.convert(0xFF0000) == masks[0]
    assert fmt.convert(0x00FF00) == masks[1]
    assert fmt.convert(0x0000FF) == masks[2]


@pytest.mark.parametrize("masks", [RGB565, RGB555])
def test_white_and_black(masks):
    fmt = pixel_format_from_masks(*masks, 15)
    assert fmt.convert(0xFFFFFF) == masks[0] | masks[1] | masks[2]
    assert fmt.convert(0) == 0


@pytest.mark.parametrize("color", [0x123456, 0xABCDEF, 0x808080, 0x010203])
def test_result_stays_within_masks(color):
    fmt = pixel_format_from_masks(*RGB565, 16)
    allowed = RGB565[0] | RGB565[1] | RGB565[2]
    assert fmt.convert(color) & ~allowed == 0


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        pixel_format_from_masks(0, 0x07E0, 0x001F, 16)


def test_direct_construction_converts():
    fmt = PixelFormat(16, 11, 5, 5, 6, 0, 5)
    assert fmt.convert(0xFF0000) == RGB565[0]