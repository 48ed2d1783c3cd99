import pytest
from PIL import Image as PILImage

from ugine.collision import (
    CollisionPixelData,
    circle_to_circle,
    circle_to_pixels,
    circle_to_rect,
    pixels_to_pixels,
    pixels_to_rect,
    rect_to_rect,
)

SOLID = bytes([0, 0, 0, 255])
CLEAR = bytes([0, 0, 0, 0])
WHITE = bytes([255, 255, 255, 255])


def mask_with_one_solid(size, sx, sy):
    data = [x == sx and y == sy for y in range(size) for x in range(size)]
    return CollisionPixelData(size, size, data)


def test_from_rgba_only_opaque_black_is_solid():
    mask = CollisionPixelData.from_rgba(3, 1, SOLID + CLEAR + WHITE)
    assert [mask.get(x, 0) for x in range(3)] == [True, False, False]


def test_from_rgba_bad_size():
    with pytest.raises(ValueError):
        CollisionPixelData.from_rgba(2, 2, SOLID)


def test_mask_bad_size():
    with pytest.raises(ValueError):
        CollisionPixelData(2, 2, [True])


def test_get_truncates_coordinates():
    mask = mask_with_one_solid(4, 2, 1)
    assert mask.get(2.7, 1.9) is True
    assert mask.get(1.9, 1.9) is False


def test_from_file(tmp_path):
    img = PILImage.new("RGBA", (2, 2), (0, 0, 0, 0))
    img.putpixel((1, 0), (0, 0, 0, 255))
    path = tmp_path / "mask.png"
    img.save(path)
    mask = CollisionPixelData.from_file(str(path))
    assert mask.data == (False, True, False, False)
    assert mask.filename == str(path)


def test_circle_to_circle():
    assert circle_to_circle(0, 0, 5, 8, 0, 5)
    assert not circle_to_circle(0, 0, 5, 10, 0, 5)


def test_circle_to_rect():
    assert circle_to_rect(5, 5, 1, 0, 0, 10, 10)
    assert circle_to_rect(-3, 5, 3, 0, 0, 10, 10)
    assert not circle_to_rect(-3, 5, 2.5, 0, 0, 10, 10)


def test_rect_to_rect():
    assert rect_to_rect(0, 0, 10, 10, 5, 5, 10, 10)
    assert not rect_to_rect(0, 0, 10, 10, 11, 11, 10, 10)


def test_pixels_to_rect():
    mask = mask_with_one_solid(8, 6, 6)
    assert pixels_to_rect(mask, 0, 0, 5, 5, 3, 3)
    assert not pixels_to_rect(mask, 0, 0, 0, 0, 3, 3)
    assert not pixels_to_rect(mask, 0, 0, 50, 50, 3, 3)


def test_pixels_to_pixels():
    a = mask_with_one_solid(4, 3, 3)
    b = mask_with_one_solid(4, 0, 0)
    assert pixels_to_pixels(a, 0, 0, b, 3, 3)
    assert not pixels_to_pixels(a, 0, 0, b, 2, 2)
    assert not pixels_to_pixels(a, 0, 0, b, 40, 40)


def test_circle_to_pixels():
    mask = mask_with_one_solid(10, 5, 5)
    assert circle_to_pixels(5, 5, 2, mask, 0, 0)
    assert not circle_to_pixels(1, 1, 2, mask, 0, 0)
    assert not circle_to_pixels(100, 100, 2, mask, 0, 0)