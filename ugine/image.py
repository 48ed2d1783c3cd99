"""Image metadata: size, animation frames, handle and texture extents."""

from __future__ import annotations

from PIL import Image as PILImage


def _next_power_of_two(n: int) -> int:
    if n <= 0:
        return n
    return 1 << (n - 1).bit_length()


class Image:
    """A sprite sheet split into ``hframes`` x ``vframes`` equal frames.

    ``width`` and ``height`` are the size of the whole image in pixels.
    Images whose sides are not powers of two are padded for texturing, so
    ``last_u`` and ``last_v`` give the fraction of the padded texture used.
    """

    def __init__(self, width: int, height: int, hframes: int = 1,
                 vframes: int = 1, filename: str = "") -> None:
        if hframes < 1 or vframes < 1:
            raise ValueError("frame counts must be at least 1")
        self.filename = filename
        self.width = int(width)
        self.height = int(height)
        self.hframes = hframes
        self.vframes = vframes
        self.handle_x = 0.0
        self.handle_y = 0.0
        self.texture_width = _next_power_of_two(self.width)
        self.texture_height = _next_power_of_two(self.height)
        if (self.texture_width != self.width
                or self.texture_height != self.height):
            self.last_u = self.width / self.texture_width
            self.last_v = self.height / self.texture_height
        else:
            self.last_u = 1.0
            self.last_v = 1.0

    @classmethod
    def load(cls, filename: str, hframes: int = 1, vframes: int = 1) -> "Image":
        """Read the size of an image file."""
        with PILImage.open(filename) as img:
            width, height = img.size
        return cls(width, height, hframes, vframes, str(filename))

    @property
    def valid(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def frame_width(self) -> int:
        return self.width // self.hframes

    @property
    def frame_height(self) -> int:
        return self.height // self.vframes

    @property
    def num_frames(self) -> int:
        return self.hframes * self.vframes

    def set_handle(self, x: float, y: float) -> None:
        self.handle_x = x
        self.handle_y = y

    def set_mid_handle(self) -> None:
        """Put the handle at the centre of a frame."""
        self.set_handle(self.frame_width / 2, self.frame_height / 2)