"""Tile maps read from XML map files."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass, field

from .image import Image

NO_GROUND = float(2**32 - 1)

Rect = tuple[float, float, float, float]


def _strip_dir(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1]


@dataclass
class TileMap:
    """A grid of tile ids; negative ids are empty cells."""

    filename: str = ""
    first_collision_id: int = 0
    width: int = 0
    height: int = 0
    tile_width: float = 0.0
    tile_height: float = 0.0
    tile_ids: list[int] = field(default_factory=list)
    image_file: str = ""
    image_path: str = ""
    hframes: int = 1
    vframes: int = 1
    tile_offset_x: int = 0
    tile_offset_y: int = 0
    image: Image | None = None
    valid: bool = False

    @classmethod
    def parse(cls, text: str, filename: str = "",
              first_collision_id: int = 0) -> TileMap:
        """Read a map document; only uncompressed, unencoded layers are valid."""
        result = cls(filename=filename, first_collision_id=first_collision_id)
        if not text:
            return result
        root = ET.fromstring(text)
        result.width = int(root.attrib["width"])
        result.height = int(float(root.attrib["height"]))
        result.tile_width = float(root.attrib["tilewidth"])
        result.tile_height = float(root.attrib["tileheight"])

        tileset = root.find("tileset")
        if tileset is None:
            raise ValueError("map has no tileset")
        first_gid = int(tileset.attrib["firstgid"])
        set_tile_width = int(tileset.attrib["tilewidth"])
        set_tile_height = int(tileset.attrib["tileheight"])
        offset = tileset.find("tileoffset")
        if offset is not None:
            result.tile_offset_x = int(offset.attrib["x"])
            result.tile_offset_y = int(offset.attrib["y"])
        image_node = tileset.find("image")
        if image_node is None:
            raise ValueError("tileset has no image")
        result.image_file = _strip_dir(image_node.attrib["source"])
        result.hframes = int(image_node.attrib["width"]) // set_tile_width
        result.vframes = int(image_node.attrib["height"]) // set_tile_height

        data = root.find("layer/data")
        if data is None:
            raise ValueError("map has no layer data")
        if "encoding" in data.attrib or "compression" in data.attrib:
            return result
        result.tile_ids = [int(t.attrib["gid"]) - first_gid
                           for t in data.findall("tile")]
        result.image_path = os.path.join(os.path.dirname(filename), result.image_file)
        result.valid = True
        return result

    @classmethod
    def load(cls, filename: str, first_collision_id: int = 0) -> TileMap:
        """Read a map file and the tileset image it names."""
        with open(filename, encoding="utf-8") as fh:
            result = cls.parse(fh.read(), str(filename), first_collision_id)
        if result.valid:
            result.image = Image.load(result.image_path, result.hframes, result.vframes)
            result.image.set_handle(result.tile_offset_x, result.tile_offset_y)
        return result

    @property
    def columns(self) -> int:
        return self.width

    @property
    def rows(self) -> int:
        return self.height

    def tile_id(self, x: int, y: int) -> int:
        return self.tile_ids[y * self.width + x]

    def check_collision(self, collides: Callable[[Rect], bool]) -> bool:
        """True if ``collides`` accepts the box of any solid tile."""
        for y in range(self.rows):
            for x in range(self.columns):
                if self.tile_id(x, y) >= self.first_collision_id:
                    box = (x * self.tile_width, y * self.tile_height,
                           self.tile_width, self.tile_height)
                    if collides(box):
                        return True
        return False

    def ground_y(self, x: float, y: float) -> float:
        """Top of the first tile at or below ``(x, y)``, or ``NO_GROUND``."""
        if (x < 0 or x >= self.width * self.tile_width
                or y >= self.height * self.tile_height):
            return NO_GROUND
        y = max(y, 0)
        column = int(x / self.tile_width)
        for row in range(int(y / self.tile_height), self.height):
            if self.tile_ids[row * self.width + column] >= 0:
                return row * self.tile_height
        return NO_GROUND