"""Collision tests between circles, rectangles and pixel masks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from PIL import Image as PILImage

from .mathutil import (
    closest_point_to_rect,
    distance,
    overlapping_rect,
    point_in_rect,
    rects_overlap,
)

_SOLID = b"\x00\x00\x00\xff"


class CollisionPixelData:
    """A per-pixel collision mask; opaque black pixels are solid."""

    def __init__(self, width: int, height: int, data: Iterable[bool],
                 filename: str = "") -> None:
        self.width = int(width)
        self.height = int(height)
        self.data = tuple(bool(v) for v in data)
        self.filename = filename
        if len(self.data) != self.width * self.height:
            raise ValueError("mask size does not match width * height")

    @classmethod
    def from_rgba(cls, width: int, height: int, rgba: bytes,
                  filename: str = "") -> "CollisionPixelData":
        """Build a mask from RGBA bytes, four per pixel."""
        if len(rgba) != width * height * 4:
            raise ValueError("RGBA buffer size does not match width * height")
        data = (rgba[i:i + 4] == _SOLID for i in range(0, len(rgba), 4))
        return cls(width, height, data, filename)

    @classmethod
    def from_file(cls, filename: str) -> "CollisionPixelData":
        with PILImage.open(filename) as img:
            rgba = img.convert("RGBA")
            width, height = rgba.size
            return cls.from_rgba(width, height, rgba.tobytes(), str(filename))

    @property
    def valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def get(self, x: float, y: float) -> bool:
        """Whether the pixel at ``(x, y)`` is solid."""
        return self.data[self.width * int(y) + int(x)]


def _steps(start: float, stop: float) -> Iterator[float]:
    value = start
    while value < stop:
        yield value
        value += 1


def circle_to_circle(x1: float, y1: float, r1: float,
                     x2: float, y2: float, r2: float) -> bool:
    return distance(x1, y1, x2, y2) < r1 + r2


def circle_to_pixels(cx: float, cy: float, cr: float,
                     pixels: CollisionPixelData, px: float, py: float) -> bool:
    if not rects_overlap(cx - cr, cy - cr, cr * 2, cr * 2,
                         px, py, pixels.width, pixels.height):
        return False
    ox, oy, ow, oh = overlapping_rect(cx - cr, cy - cr, cr * 2, cr * 2,
                                      px, py, pixels.width, pixels.height)
    for off_y in _steps(oy - py, oh + oy - py):
        for off_x in _steps(ox - px, ow + ox - px):
            if (pixels.get(off_x, off_y)
                    and distance(cx, cy, off_x + px, off_y + py) <= cr):
                return True
    return False


def circle_to_rect(cx: float, cy: float, cr: float,
                   rx: float, ry: float, rw: float, rh: float) -> bool:
    if point_in_rect(cx, cy, rx, ry, rw, rh):
        return True
    near_x, near_y = closest_point_to_rect(cx, cy, rx, ry, rw, rh)
    return distance(cx, cy, near_x, near_y) <= cr


def pixels_to_pixels(p1: CollisionPixelData, x1: float, y1: float,
                     p2: CollisionPixelData, x2: float, y2: float) -> bool:
    if not rects_overlap(x1, y1, p1.width, p1.height,
                         x2, y2, p2.width, p2.height):
        return False
    ox, oy, ow, oh = overlapping_rect(x1, y1, p1.width, p1.height,
                                      x2, y2, p2.width, p2.height)
    rows = zip(_steps(oy - y1, oh + oy - y1), _steps(oy - y2, oh + oy - y2))
    for py1, py2 in rows:
        cols = zip(_steps(ox - x1, ow + ox - x1), _steps(ox - x2, ow + ox - x2))
        for px1, px2 in cols:
            if p1.get(px1, py1) and p2.get(px2, py2):
                return True
    return False


def pixels_to_rect(pixels: CollisionPixelData, px: float, py: float,
                   rx: float, ry: float, rw: float, rh: float) -> bool:
    if not rects_overlap(px, py, pixels.width, pixels.height, rx, ry, rw, rh):
        return False
    ox, oy, ow, oh = overlapping_rect(px, py, pixels.width, pixels.height,
                                      rx, ry, rw, rh)
    for off_y in _steps(oy - py, oh + oy - py):
        for off_x in _steps(ox - px, ow + ox - px):
            if pixels.get(off_x, off_y):
                return True
    return False


def rect_to_rect(x1: float, y1: float, w1: float, h1: float,
                 x2: float, y2: float, w2: float, h2: float) -> bool:
    return rects_overlap(x1, y1, w1, h1, x2, y2, w2, h2)