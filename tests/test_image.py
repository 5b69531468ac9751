import pytest

from cubmap.image import Image, convert_color


def test_new_image_is_blank_and_sized():
    image = Image(5, 3)
    assert image.size_line == 5 * 4
    assert len(image.data) == image.size_line * image.height
    assert set(image.data) == {0}


def test_rows_are_padded_to_32_bits():
    image = Image(3, 2, bits_per_pixel=8)
    assert image.size_line % 4 == 0
    assert image.size_line >= 3


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0x7F00FF00])
def test_set_get_round_trip(color):
    image = Image(4, 4)
    image.set_pixel(2, 3, color)
    assert image.get_pixel(2, 3) == color
    assert image.get_pixel(1, 3) == 0


def test_little_endian_layout():
    image = Image(2, 2)
    image.set_pixel(1, 1, 0x112233)
    offset = image.size_line + 4
    assert bytes(image.data[offset : offset + 4]) == bytes([0x33, 0x22, 0x11, 0x00])


def test_big_endian_layout():
    image = Image(2, 2, byte_order=1)
    image.set_pixel(0, 0, 0x112233)
    assert bytes(image.data[0:4]) == bytes([0x00, 0x11, 0x22, 0x33])
    assert image.get_pixel(0, 0) == 0x112233


def test_negative_color_is_masked():
    image = Image(1, 1)
    image.set_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 2)])
def test_out_of_bounds(x, y):
    image = Image(4, 2)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 1},
        {"width": 1, "height": -2},
        {"width": 1, "height": 1, "bits_per_pixel": 12},
        {"width": 1, "height": 1, "byte_order": 2},
    ],
)
def test_invalid_images(kwargs):
    with pytest.raises(ValueError):
        Image(**kwargs)


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF])
def test_deep_displays_keep_color(color):
    assert convert_color(color, 24, (16, 8, 8, 8, 0, 8)) == color
    assert convert_color(color, 32, ()) == color


def test_rgb565_conversion():
    shifts = (11, 5, 5, 6, 0, 5)
    assert convert_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert convert_color(0x000000, 16, shifts) == 0


def test_888_shifts_on_shallow_display_are_identity():
    shifts = (16, 8, 8, 8, 0, 8)
    assert convert_color(0xABCDEF, 16, shifts) == 0xABCDEF


def test_bad_shift_count():
    with pytest.raises(ValueError):
        convert_color(0x123456, 16, (1, 2, 3))