"""Bitmap fonts laid out as 16 x 16 glyph sheets with marker pixels."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image as PILImage

from .image import Image

FONT_FRAMES = 16

_BLACK = b"\x00\x00\x00\xff"
_YELLOW = b"\xff\xff\x00\xff"
_RED = b"\xff\x00\x00\xff"
_TRANSPARENT = b"\x00\x00\x00\x00"


@dataclass
class Glyph:
    """Extent of a character inside its frame."""

    orig_x: float = 0
    orig_y: float = 0
    end_x: float = 0
    end_y: float = 0


class Font(Image):
    """A font sheet of 256 frames indexed by character code.

    In each frame a yellow pixel marks the glyph origin and a red pixel its
    end; those markers and black background pixels become transparent.
    """

    def __init__(self, width: int, height: int, filename: str = "") -> None:
        super().__init__(width, height, FONT_FRAMES, FONT_FRAMES, filename)
        self.glyphs = [Glyph(0, 0, self.frame_width, self.frame_height)
                       for _ in range(self.num_frames)]
        self.pixels = bytes(self.width * self.height * 4)

    @classmethod
    def from_rgba(cls, width: int, height: int, rgba: bytes,
                  filename: str = "") -> Font:
        if len(rgba) != width * height * 4:
            raise ValueError("RGBA buffer size does not match width * height")
        font = cls(width, height, filename)
        buf = bytearray(rgba)
        fw, fh = font.frame_width, font.frame_height
        for index, glyph in enumerate(font.glyphs):
            row, col = divmod(index, font.hframes)
            for j in range(fh):
                base = ((row * fh + j) * width + col * fw) * 4
                for i in range(fw):
                    at = base + i * 4
                    pixel = bytes(buf[at:at + 4])
                    if pixel == _BLACK:
                        buf[at:at + 4] = _TRANSPARENT
                    elif pixel == _YELLOW:
                        glyph.orig_x, glyph.orig_y = i, j
                        buf[at:at + 4] = _TRANSPARENT
                    elif pixel == _RED:
                        glyph.end_x, glyph.end_y = i, j
                        buf[at:at + 4] = _TRANSPARENT
        font.pixels = bytes(buf)
        return font

    @classmethod
    def load(cls, filename: str) -> Font:
        with PILImage.open(filename) as img:
            rgba = img.convert("RGBA")
            width, height = rgba.size
            return cls.from_rgba(width, height, rgba.tobytes(), str(filename))

    @property
    def size(self) -> int:
        return self.frame_height

    def _glyph(self, char: str) -> Glyph:
        code = ord(char)
        if code >= len(self.glyphs):
            raise ValueError(f"character {char!r} is not in the font")
        return self.glyphs[code]

    def text_width(self, text: str) -> int:
        return sum(g.end_x - g.orig_x for g in map(self._glyph, text))

    def text_height(self, text: str) -> int:
        return max((g.end_y - g.orig_y for g in map(self._glyph, text)), default=0)