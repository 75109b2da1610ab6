import pytest

from minipix.image import new_image


def test_default_layout():
    img = new_image(5, 3)
    assert img.bits_per_pixel == 32
    assert img.size_line == 5 * 32 // 8
    assert len(img.data) == img.size_line * img.height
    assert not any(img.data)


def test_rows_padded_to_32_bits():
    img = new_image(3, 2, bits_per_pixel=24)
    assert img.size_line % 4 == 0
    assert img.size_line >= 3 * 3
    assert len(img.data) == img.size_line * 2


@pytest.mark.parametrize("bpp", [8, 16, 24, 32])
@pytest.mark.parametrize("endian", [0, 1])
def test_round_trip(bpp, endian):
    img = new_image(4, 4, bits_per_pixel=bpp, endian=endian)
    color = 0x11223344 & ((1 << bpp) - 1)
    img.put_pixel(2, 3, color)
    assert img.get_pixel(2, 3) == color
    assert img.get_pixel(0, 0) == 0


def test_little_endian_bytes():
    img = new_image(2, 2)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == (0x11223344).to_bytes(4, "little")


def test_big_endian_bytes():
    img = new_image(2, 2, endian=1)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == (0x11223344).to_bytes(4, "big")


def test_pixel_offset_uses_size_line():
    img = new_image(3, 3)
    img.put_pixel(1, 2, 0xAABBCC)
    start = 2 * img.size_line + 1 * img.bytes_per_pixel
    assert bytes(img.data[start:start + 4]) == (0xAABBCC).to_bytes(4, "little")
    assert sum(1 for b in img.data if b) == 3


def test_color_truncated_to_pixel_size():
    img = new_image(1, 1, bits_per_pixel=16)
    img.put_pixel(0, 0, 0x12345)
    assert img.get_pixel(0, 0) == 0x12345 & 0xFFFF


def test_negative_color_stored_unsigned():
    img = new_image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == (1 << 32) - 1


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_out_of_range(x, y):
    img = new_image(2, 2)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 1},
        {"width": 1, "height": -1},
        {"width": 1, "height": 1, "bits_per_pixel": 12},
        {"width": 1, "height": 1, "endian": 2},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        new_image(**kwargs)